"""Predefined holidays and lookup by name."""

from __future__ import annotations

from holiday_rules.dates.resolver import sort_key
from holiday_rules.exceptions import UnknownHolidayError
from holiday_rules.holidays import common, united_states
from holiday_rules.models.holiday import Holiday

ALL_HOLIDAYS: tuple[Holiday, ...] = tuple(sorted(
    [
        value
        for module in (common, united_states)
        for value in vars(module).values()
        if isinstance(value, Holiday)
    ],
    key=sort_key,
))

_ALIASES: dict[str, Holiday] = {
    "mlk": united_states.MLK_DAY,
    "superbowl": united_states.SUPER_BOWL_SUNDAY,
    "superbowl sunday": united_states.SUPER_BOWL_SUNDAY,
    "super bowl": united_states.SUPER_BOWL_SUNDAY,
    "july 4th": united_states.INDEPENDENCE_DAY,
    "july fourth": united_states.INDEPENDENCE_DAY,
    "fourth of july": united_states.INDEPENDENCE_DAY,
    "dst start": united_states.DST_START,
    "dst end": united_states.DST_END,
    "st patricks": common.ST_PATRICKS_DAY,
    "xmas": common.CHRISTMAS,
}


def _normalize(name: str) -> str:
    """Lowercase, drop apostrophes, a leading "the" and a trailing "day"."""
    s = " ".join(name.lower().replace("'", "").split())
    s = s.removeprefix("the ")
    return s.removesuffix(" day").strip()


_BY_NAME: dict[str, Holiday] = {
    **{_normalize(h.label): h for h in ALL_HOLIDAYS},
    **_ALIASES,
}


def parse_holiday(name: str) -> Holiday:
    """Look up a predefined holiday by name or alias.

    Matching ignores case, apostrophes, a leading "the" and a trailing
    "day", so "Thanksgiving", "the fourth of July" and "mothers day" all
    resolve.

    Raises:
        UnknownHolidayError: No predefined holiday matches.
    """
    try:
        return _BY_NAME[_normalize(name)]
    except KeyError:
        raise UnknownHolidayError(name) from None


__all__ = ["ALL_HOLIDAYS", "common", "parse_holiday", "united_states"]
