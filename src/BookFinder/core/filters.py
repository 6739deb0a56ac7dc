"""Client-side post-filters applied to a fetched result page.

The remote endpoint only matches on title; author and publish-year
constraints are evaluated locally against the parsed records.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from BookFinder.core.models import BookRecord


@dataclass(frozen=True, slots=True)
class RecordFilter:
    """Post-filter snapshot captured when a query is dispatched.

    Attributes:
        author: Case-insensitive substring matched against any author name.
            Empty means no author constraint.
        year_min: Inclusive lower bound on first publish year.
        year_max: Inclusive upper bound on first publish year.
    """

    author: str = ""
    year_min: int | None = None
    year_max: int | None = None

    @property
    def is_empty(self) -> bool:
        return not self.author and self.year_min is None and self.year_max is None

    def accepts(self, record: BookRecord) -> bool:
        """Return True if a record satisfies every active constraint."""
        if self.author:
            needle = self.author.casefold()
            if not any(needle in name.casefold() for name in record.author_names):
                return False
        year = record.first_publish_year
        # A record without a year fails any active bound.
        if self.year_min is not None and (year is None or year < self.year_min):
            return False
        if self.year_max is not None and (year is None or year > self.year_max):
            return False
        return True

    def apply(self, records: Iterable[BookRecord]) -> tuple[BookRecord, ...]:
        """Keep matching records, preserving their order."""
        if self.is_empty:
            return tuple(records)
        return tuple(record for record in records if self.accepts(record))


def filter_records(
    records: Iterable[BookRecord],
    author: str = "",
    year_min: int | None = None,
    year_max: int | None = None,
) -> tuple[BookRecord, ...]:
    """Filter records by author substring and publish-year range.

    Args:
        records: Records in remote order.
        author: Author substring; empty disables the author check.
        year_min: Inclusive lower year bound, or None.
        year_max: Inclusive upper year bound, or None.

    Returns:
        Matching records in their original order.
    """
    return RecordFilter(author=author, year_min=year_min, year_max=year_max).apply(records)
