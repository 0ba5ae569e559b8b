"""HolidayService: next occurrences, days-until and upcoming calendars."""

from __future__ import annotations

import logging
from datetime import date, timedelta

from holiday_rules.dates.iterator import occurrences_between
from holiday_rules.dates.resolver import after, resolve, sort_key
from holiday_rules.holidays import parse_holiday
from holiday_rules.models.holiday import Holiday, HolidayCalendar, HolidayOccurrence, Weekday

logger = logging.getLogger(__name__)


class HolidayService:
    """Resolve holidays by name or model and build upcoming-holiday calendars.

    Args:
        holidays: Holidays tracked by ``calendar()``. None = the names in
            ``calendar.default_holidays`` from config.
    """

    def __init__(self, holidays: list[Holiday] | None = None) -> None:
        if holidays is None:
            from holiday_rules.config import get_settings

            holidays = [parse_holiday(n) for n in get_settings().calendar.default_holidays]
        self._holidays = tuple(sorted(holidays, key=sort_key))

    @property
    def holidays(self) -> tuple[Holiday, ...]:
        return self._holidays

    @staticmethod
    def _lookup(holiday: Holiday | str) -> Holiday:
        if isinstance(holiday, str):
            return parse_holiday(holiday)
        return holiday

    def resolve(self, holiday: Holiday | str, year: int) -> date:
        """Date of a holiday in the given year."""
        return resolve(self._lookup(holiday), year)

    def next_occurrence(self, holiday: Holiday | str, as_of: date | None = None) -> date:
        """Next occurrence on or after as_of (default: today)."""
        return after(self._lookup(holiday), as_of or date.today())

    def days_until(self, holiday: Holiday | str, as_of: date | None = None) -> int:
        """Days from as_of (default: today) to the next occurrence; 0 if today."""
        today = as_of or date.today()
        return (self.next_occurrence(holiday, today) - today).days

    def calendar(
        self,
        as_of: date | None = None,
        lookahead_days: int | None = None,
    ) -> HolidayCalendar:
        """Upcoming occurrences of the tracked holidays.

        Args:
            as_of: Reference date (default: today).
            lookahead_days: Include occurrences within this many days.
                If None, uses config setting.
        """
        if as_of is None:
            as_of = date.today()
        if lookahead_days is None:
            from holiday_rules.config import get_settings
            lookahead_days = get_settings().calendar.lookahead_days

        end = as_of + timedelta(days=lookahead_days)
        occurrences: list[HolidayOccurrence] = []
        for holiday in self._holidays:
            for d in occurrences_between(holiday, as_of, end):
                occurrences.append(self._occurrence(holiday, d, as_of))
        occurrences.sort(key=lambda o: o.date)

        upcoming = [
            self._occurrence(h, after(h, as_of), as_of) for h in self._holidays
        ]
        next_holiday = min(upcoming, key=lambda o: o.date) if upcoming else None

        logger.debug(
            "Holiday calendar as of %s: %d occurrences in %d days",
            as_of, len(occurrences), lookahead_days,
        )
        return HolidayCalendar(
            as_of=as_of,
            occurrences=occurrences,
            next_holiday=next_holiday,
            days_to_next=next_holiday.days_away if next_holiday else None,
        )

    @staticmethod
    def _occurrence(holiday: Holiday, d: date, as_of: date) -> HolidayOccurrence:
        return HolidayOccurrence(
            label=holiday.label,
            date=d,
            weekday=Weekday(d.weekday()),
            days_away=(d - as_of).days,
        )
