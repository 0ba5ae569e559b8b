"""Lazy iteration over a rule's occurrences across years."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import MAXYEAR, MINYEAR, date

from holiday_rules.dates.resolver import RuleLike, resolve
from holiday_rules.exceptions import InvalidDateError

logger = logging.getLogger(__name__)


class OccurrenceIterator:
    """One occurrence per year, starting at ``start_year``.

    Each ``next()`` resolves exactly one year. The sequence only ends after
    the last year ``date`` can represent. Instances hold nothing but year
    counters, so a fresh iterator over the same rule and start year replays
    the same dates.

    ``previous()`` steps the other way: it returns the occurrence before the
    one last returned, and a following ``next()`` continues forward from
    there.

    Args:
        rule: Holiday or bare rule to resolve.
        start_year: First year to resolve.
        skip_invalid: Skip years with no occurrence instead of raising
            InvalidDateError.
    """

    def __init__(self, rule: RuleLike, start_year: int, skip_invalid: bool = False) -> None:
        self._rule = rule
        self._start_year = start_year
        self._skip_invalid = skip_invalid
        self._year = start_year
        self._current: int | None = None

    @property
    def year(self) -> int:
        """Year the next step will resolve."""
        return self._year

    def __iter__(self) -> OccurrenceIterator:
        return self

    def _step(self, year: int) -> date | None:
        # Moves the cursor to ``year`` whether or not it resolves
        self._current = year
        self._year = year + 1
        try:
            return resolve(self._rule, year)
        except InvalidDateError:
            if not self._skip_invalid:
                raise
            logger.debug("Skipping %d: no occurrence", year)
            return None

    def __next__(self) -> date:
        while self._year <= MAXYEAR:
            occurrence = self._step(self._year)
            if occurrence is not None:
                return occurrence
        raise StopIteration

    def previous(self) -> date:
        """Occurrence in the year before the one last returned.

        Raises:
            StopIteration: Stepped below the first year ``date`` can represent.
        """
        year = (self._start_year if self._current is None else self._current) - 1
        while year >= MINYEAR:
            occurrence = self._step(year)
            if occurrence is not None:
                return occurrence
            year -= 1
        raise StopIteration

    def restart(self) -> OccurrenceIterator:
        """Fresh iterator from the original start year."""
        return OccurrenceIterator(self._rule, self._start_year, self._skip_invalid)


def iterate(rule: RuleLike, start_year: int, *, skip_invalid: bool = False) -> OccurrenceIterator:
    """Occurrences of ``rule`` in ``start_year``, ``start_year + 1``, ..."""
    return OccurrenceIterator(rule, start_year, skip_invalid=skip_invalid)


def occurrences_between(rule: RuleLike, start: date, end: date) -> Iterator[date]:
    """All occurrences in [start, end], ascending."""
    if end < start:
        return
    for d in OccurrenceIterator(rule, start.year, skip_invalid=True):
        if d > end:
            return
        if d >= start:
            yield d
        if d.year >= end.year:
            return
