"""Annually repeating dates: fixed days and Nth weekdays of a month, resolved per year."""

# Config
from holiday_rules.config import Settings, get_settings

# Models
from holiday_rules.models.holiday import (
    DayOfMonth,
    Holiday,
    HolidayCalendar,
    HolidayOccurrence,
    Month,
    NthWeekday,
    NthWeekdayOfMonth,
    Weekday,
    new_fixed,
    new_nth,
)

# Errors
from holiday_rules.exceptions import InvalidDateError, UnknownHolidayError

# Resolution and iteration
from holiday_rules.dates.resolver import (
    after,
    after_today,
    before,
    before_today,
    first_date,
    last_date,
    matches,
    resolve,
    sort_key,
)
from holiday_rules.dates.iterator import OccurrenceIterator, iterate, occurrences_between

# Predefined holidays
from holiday_rules.holidays import ALL_HOLIDAYS, parse_holiday

# Services
from holiday_rules.service.holiday_service import HolidayService

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Models
    "DayOfMonth",
    "Holiday",
    "HolidayCalendar",
    "HolidayOccurrence",
    "Month",
    "NthWeekday",
    "NthWeekdayOfMonth",
    "Weekday",
    "new_fixed",
    "new_nth",
    # Errors
    "InvalidDateError",
    "UnknownHolidayError",
    # Resolution and iteration
    "after",
    "after_today",
    "before",
    "before_today",
    "first_date",
    "last_date",
    "matches",
    "resolve",
    "sort_key",
    "OccurrenceIterator",
    "iterate",
    "occurrences_between",
    # Predefined holidays
    "ALL_HOLIDAYS",
    "parse_holiday",
    # Services
    "HolidayService",
]
