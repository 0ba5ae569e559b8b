"""Tests for low-level calendar helpers."""

from datetime import date

from holiday_rules.dates._date_math import day_exists, weekdays_in_month


class TestWeekdaysInMonth:
    def test_five_fridays(self):
        # January 2021 starts on a Friday
        assert weekdays_in_month(2021, 1, 4) == [
            date(2021, 1, 1),
            date(2021, 1, 8),
            date(2021, 1, 15),
            date(2021, 1, 22),
            date(2021, 1, 29),
        ]

    def test_four_or_five_every_month(self):
        for year in (1900, 2000, 2021, 2024):
            for month in range(1, 13):
                for weekday in range(7):
                    dates = weekdays_in_month(year, month, weekday)
                    assert len(dates) in (4, 5)
                    assert all(d.weekday() == weekday for d in dates)
                    assert all(d.month == month for d in dates)
                    assert dates == sorted(dates)

    def test_non_leap_february_has_exactly_four(self):
        for weekday in range(7):
            assert len(weekdays_in_month(2021, 2, weekday)) == 4

    def test_representable_edges(self):
        assert weekdays_in_month(1, 1, 0)[0] == date(1, 1, 1)
        assert weekdays_in_month(9999, 12, 4)[-1] == date(9999, 12, 31)


class TestDayExists:
    def test_leap_years(self):
        assert day_exists(2020, 2, 29)
        assert day_exists(2000, 2, 29)
        assert not day_exists(1900, 2, 29)
        assert not day_exists(2021, 2, 29)

    def test_month_ends(self):
        assert day_exists(2021, 1, 31)
        assert not day_exists(2021, 4, 31)
        assert not day_exists(2021, 1, 0)
