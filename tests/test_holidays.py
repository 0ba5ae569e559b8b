"""Tests for the predefined holidays and name lookup."""

from datetime import date

import pytest

from holiday_rules.dates.resolver import resolve, sort_key
from holiday_rules.exceptions import UnknownHolidayError
from holiday_rules.holidays import ALL_HOLIDAYS, parse_holiday
from holiday_rules.holidays.common import CHRISTMAS, NEW_YEARS_DAY, NEW_YEARS_EVE, ST_PATRICKS_DAY
from holiday_rules.holidays.united_states import (
    INDEPENDENCE_DAY,
    MEMORIAL_DAY,
    MLK_DAY,
    MOTHERS_DAY,
    PRESIDENTS_DAY,
    SUPER_BOWL_SUNDAY,
    THANKSGIVING,
)


class TestPredefined:
    def test_all_holidays_count(self):
        assert len(ALL_HOLIDAYS) == 24

    def test_all_holidays_in_calendar_order(self):
        assert list(ALL_HOLIDAYS) == sorted(ALL_HOLIDAYS, key=sort_key)
        assert ALL_HOLIDAYS[0] is NEW_YEARS_DAY
        assert ALL_HOLIDAYS[-1] is NEW_YEARS_EVE

    def test_labels_unique(self):
        labels = [h.label for h in ALL_HOLIDAYS]
        assert len(labels) == len(set(labels))

    def test_every_holiday_resolves(self):
        for holiday in ALL_HOLIDAYS:
            for year in range(2020, 2031):
                assert resolve(holiday, year).year == year

    def test_us_dates_2026(self):
        assert resolve(MLK_DAY, 2026) == date(2026, 1, 19)
        assert resolve(MOTHERS_DAY, 2026) == date(2026, 5, 10)
        assert resolve(MEMORIAL_DAY, 2026) == date(2026, 5, 25)
        assert resolve(THANKSGIVING, 2026) == date(2026, 11, 26)


class TestParseHoliday:
    @pytest.mark.parametrize("name,expected", [
        ("Thanksgiving", THANKSGIVING),
        ("thanksgiving", THANKSGIVING),
        ("THANKSGIVING DAY", THANKSGIVING),
        ("Memorial Day", MEMORIAL_DAY),
        ("mothers day", MOTHERS_DAY),
        ("Mother's Day", MOTHERS_DAY),
        ("Presidents Day", PRESIDENTS_DAY),
        ("Martin Luther King Jr. Day", MLK_DAY),
        ("the Fourth of July", INDEPENDENCE_DAY),
        ("July 4th", INDEPENDENCE_DAY),
        ("Independence Day", INDEPENDENCE_DAY),
        ("superbowl", SUPER_BOWL_SUNDAY),
        ("Super Bowl Sunday", SUPER_BOWL_SUNDAY),
        ("New Year's Day", NEW_YEARS_DAY),
        ("new years eve", NEW_YEARS_EVE),
        ("  christmas   ", CHRISTMAS),
        ("St. Patrick's Day", ST_PATRICKS_DAY),
    ])
    def test_names_and_aliases(self, name, expected):
        assert parse_holiday(name) is expected

    def test_christmas_eve_not_christmas(self):
        assert parse_holiday("Christmas Eve").label == "Christmas Eve"

    def test_unknown_raises(self):
        with pytest.raises(UnknownHolidayError, match="festivus") as exc:
            parse_holiday("Festivus")
        assert exc.value.name == "Festivus"

    def test_unknown_is_lookup_error(self):
        with pytest.raises(LookupError):
            parse_holiday("")
