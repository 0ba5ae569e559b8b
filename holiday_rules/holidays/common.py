"""Holidays observed on the same date in most countries."""

from __future__ import annotations

from holiday_rules.models.holiday import Month, new_fixed

NEW_YEARS_DAY = new_fixed("New Year's Day", Month.JANUARY, 1)
ST_PATRICKS_DAY = new_fixed("St. Patrick's Day", Month.MARCH, 17)
CHRISTMAS_EVE = new_fixed("Christmas Eve", Month.DECEMBER, 24)
CHRISTMAS = new_fixed("Christmas", Month.DECEMBER, 25)
NEW_YEARS_EVE = new_fixed("New Year's Eve", Month.DECEMBER, 31)
