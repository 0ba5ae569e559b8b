"""Calendar arithmetic over the stdlib ``datetime`` and ``calendar`` modules."""

from __future__ import annotations

import calendar
from datetime import date, timedelta


def weekdays_in_month(year: int, month: int, weekday: int) -> list[date]:
    """All dates in a month falling on ``weekday``, ascending (always 4 or 5).

    Args:
        year: Calendar year.
        month: Calendar month (1-12).
        weekday: 0=Monday, 4=Friday, etc.
    """
    first_day = date(year, month, 1)
    # Days until first occurrence of target weekday
    days_ahead = (weekday - first_day.weekday()) % 7
    n_days = calendar.monthrange(year, month)[1]
    return [
        first_day + timedelta(days=day)
        for day in range(days_ahead, n_days, 7)
    ]


def day_exists(year: int, month: int, day: int) -> bool:
    return 1 <= day <= calendar.monthrange(year, month)[1]
