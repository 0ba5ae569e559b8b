"""Resolve holiday rules to concrete dates.

Every function here is pure: the result depends only on the rule and the
year or date passed in. Nothing is cached between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import MAXYEAR, MINYEAR, date

from holiday_rules.dates._date_math import day_exists, weekdays_in_month
from holiday_rules.exceptions import InvalidDateError
from holiday_rules.models.holiday import (
    DayOfMonth,
    Holiday,
    NthWeekday,
    NthWeekdayOfMonth,
)

logger = logging.getLogger(__name__)

RuleLike = Holiday | DayOfMonth | NthWeekdayOfMonth


def _unwrap(rule: RuleLike) -> tuple[str, DayOfMonth | NthWeekdayOfMonth]:
    if isinstance(rule, Holiday):
        return rule.label, rule.rule
    return rule.describe(), rule


def resolve(rule: RuleLike, year: int) -> date:
    """Date of a rule in the given year.

    Args:
        rule: A Holiday or a bare DayOfMonth / NthWeekdayOfMonth.
        year: Calendar year.

    Raises:
        InvalidDateError: The rule has no occurrence that year (Feb 29 in a
            common year, a fifth weekday in a month with only four, or a
            year outside the range ``date`` can represent).
    """
    label, r = _unwrap(rule)
    if not MINYEAR <= year <= MAXYEAR:
        raise InvalidDateError(label, year, "year outside representable range")

    if isinstance(r, DayOfMonth):
        if not day_exists(year, r.month, r.day):
            raise InvalidDateError(label, year, f"{r.describe()} does not exist")
        result = date(year, r.month, r.day)
    else:
        candidates = weekdays_in_month(year, r.month, r.weekday)
        if r.nth == NthWeekday.LAST:
            result = candidates[-1]
        elif r.nth > len(candidates):
            raise InvalidDateError(
                label,
                year,
                f"{r.month.name.title()} has only {len(candidates)} "
                f"{r.weekday.name.title()}s",
            )
        else:
            result = candidates[r.nth - 1]

    logger.debug("Resolved %s in %d -> %s", label, year, result)
    return result


def _try_resolve(rule: RuleLike, year: int) -> date | None:
    try:
        return resolve(rule, year)
    except InvalidDateError:
        return None


def matches(rule: RuleLike, d: date) -> bool:
    """True if the rule falls on ``d``, resolved independently for d's year."""
    return _try_resolve(rule, d.year) == d


def _scan(rule: RuleLike, years: range, accept: Callable[[date], bool], what: str) -> date:
    for year in years:
        occurrence = _try_resolve(rule, year)
        if occurrence is not None and accept(occurrence):
            return occurrence
    label, _ = _unwrap(rule)
    raise InvalidDateError(label, years[-1], f"no occurrence {what}")


def after(rule: RuleLike, d: date) -> date:
    """First occurrence on or after ``d``."""
    return _scan(
        rule, range(d.year, MAXYEAR + 1), lambda o: o >= d, f"on or after {d}"
    )


def before(rule: RuleLike, d: date) -> date:
    """Last occurrence strictly before ``d``."""
    return _scan(
        rule, range(d.year, MINYEAR - 1, -1), lambda o: o < d, f"before {d}"
    )


def after_today(rule: RuleLike, today: date | None = None) -> date:
    """Next occurrence, counting today."""
    return after(rule, today or date.today())


def before_today(rule: RuleLike, today: date | None = None) -> date:
    """Previous occurrence, not counting today."""
    return before(rule, today or date.today())


def first_date(rule: RuleLike) -> date:
    """Earliest occurrence ``date`` can represent."""
    return after(rule, date.min)


def last_date(rule: RuleLike) -> date:
    """Latest occurrence ``date`` can represent."""
    return _scan(
        rule, range(MAXYEAR, MINYEAR - 1, -1), lambda o: True, "in any year"
    )


def sort_key(rule: RuleLike) -> tuple:
    """Calendar-order key for holidays and rules.

    Month first. Within a month fixed dates come before Nth-weekday rules,
    fixed dates order by day, Nth rules by ordinal then weekday (Sunday
    first). Labels break ties.
    """
    label = rule.label if isinstance(rule, Holiday) else ""
    _, r = _unwrap(rule)
    if isinstance(r, DayOfMonth):
        return (int(r.month), 0, r.day, 0, label)
    return (int(r.month), 1, int(r.nth), r.weekday.days_from_sunday(), label)
