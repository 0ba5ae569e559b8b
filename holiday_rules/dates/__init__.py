"""Rule resolution and occurrence iteration."""

from holiday_rules.dates.iterator import OccurrenceIterator, iterate, occurrences_between
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

__all__ = [
    "OccurrenceIterator",
    "after",
    "after_today",
    "before",
    "before_today",
    "first_date",
    "iterate",
    "last_date",
    "matches",
    "occurrences_between",
    "resolve",
    "sort_key",
]
