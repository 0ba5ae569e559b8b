"""Pydantic models for annually repeating dates."""

from __future__ import annotations

import calendar
from datetime import date
from enum import IntEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Month(IntEnum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12


class Weekday(IntEnum):
    """Day of the week, numbered like ``date.weekday()`` (Monday = 0)."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    def days_from_sunday(self) -> int:
        return (self.value + 1) % 7


class NthWeekday(IntEnum):
    """Which occurrence of a weekday within a month.

    FIFTH only exists in some months; resolving it in a month with four
    matching weekdays raises InvalidDateError.
    """

    FIRST = 1
    SECOND = 2
    THIRD = 3
    FOURTH = 4
    FIFTH = 5
    LAST = 6


class DayOfMonth(BaseModel):
    """A fixed day of the month (e.g. October 31)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["fixed"] = "fixed"
    month: Month
    day: int = Field(ge=1, le=31)

    @model_validator(mode="after")
    def _check_day_in_month(self) -> DayOfMonth:
        # 2000 is a leap year: Feb 29 passes here and is checked per year on resolve
        days = calendar.monthrange(2000, self.month)[1]
        if self.day > days:
            raise ValueError(f"{self.month.name.title()} has no day {self.day}")
        return self

    def describe(self) -> str:
        return f"{self.month.name.title()} {self.day}"


class NthWeekdayOfMonth(BaseModel):
    """Relative weekday in a month (e.g. 4th Thursday in November)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["nth"] = "nth"
    nth: NthWeekday
    weekday: Weekday
    month: Month

    @classmethod
    def from_date(cls, d: date) -> NthWeekdayOfMonth:
        """The rule that ``d`` satisfies, counting from the start of its month."""
        return cls(
            nth=NthWeekday((d.day - 1) // 7 + 1),
            weekday=Weekday(d.weekday()),
            month=Month(d.month),
        )

    def describe(self) -> str:
        return f"{self.nth.name.title()} {self.weekday.name.title()} in {self.month.name.title()}"


HolidayRule = Annotated[DayOfMonth | NthWeekdayOfMonth, Field(discriminator="kind")]


class Holiday(BaseModel):
    """A labelled annually repeating date."""

    model_config = ConfigDict(frozen=True)

    label: str
    rule: HolidayRule

    @classmethod
    def from_date(cls, label: str, d: date, nth: bool = False) -> Holiday:
        """Build a holiday that falls on ``d``.

        Args:
            label: Holiday name.
            d: A date the holiday falls on.
            nth: Derive an Nth-weekday rule instead of a fixed month/day.
        """
        if nth:
            return cls(label=label, rule=NthWeekdayOfMonth.from_date(d))
        return cls(label=label, rule=DayOfMonth(month=d.month, day=d.day))

    def describe(self) -> str:
        return f"{self.label}: {self.rule.describe()}"


def new_fixed(label: str, month: Month | int, day: int) -> Holiday:
    """Create a fixed-date holiday."""
    return Holiday(label=label, rule=DayOfMonth(month=month, day=day))


def new_nth(
    label: str,
    ordinal: NthWeekday | int,
    weekday: Weekday | int,
    month: Month | int,
) -> Holiday:
    """Create an Nth-weekday-of-month holiday."""
    return Holiday(
        label=label,
        rule=NthWeekdayOfMonth(nth=ordinal, weekday=weekday, month=month),
    )


class HolidayOccurrence(BaseModel):
    """A holiday resolved to a concrete date."""

    label: str
    date: date
    weekday: Weekday
    days_away: int


class HolidayCalendar(BaseModel):
    """Upcoming holidays with convenience accessors."""

    as_of: date
    occurrences: list[HolidayOccurrence]
    next_holiday: HolidayOccurrence | None
    days_to_next: int | None
