"""Search input snapshots and the remote query builder."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, replace
from typing import Any

from BookFinder.core.filters import RecordFilter

PAGE_SIZE = 12

_LEADING_INT_RE = re.compile(r"^\s*([+-]?[0-9]+)")


@dataclass(frozen=True, slots=True)
class QueryDescriptor:
    """Minimal immutable parameter set for one remote search call.

    Author and year constraints are deliberately absent: they are applied
    after the fetch by ``RecordFilter``.
    """

    effective_title: str
    page: int = 1
    page_size: int = PAGE_SIZE

    def __post_init__(self) -> None:
        if not self.effective_title:
            raise ValueError("QueryDescriptor.effective_title must not be empty")


@dataclass(frozen=True, slots=True)
class SearchInput:
    """User-editable search parameters.

    Every edit returns a new snapshot. Edits to anything but the page
    restart pagination at page 1.

    Attributes:
        raw_query_text: Title text as typed, before debouncing.
        effective_query_text: Last committed (debounced, trimmed) title.
        author_substring: Author post-filter text.
        year_min: Parsed lower year bound, or None.
        year_max: Parsed upper year bound, or None.
        page: 1-based page number.
    """

    raw_query_text: str = ""
    effective_query_text: str = ""
    author_substring: str = ""
    year_min: int | None = None
    year_max: int | None = None
    page: int = 1

    def with_raw_text(self, text: str) -> SearchInput:
        return replace(self, raw_query_text=text)

    def with_committed_title(self, text: str) -> SearchInput:
        return replace(self, effective_query_text=text.strip(), page=1)

    def with_author(self, text: str) -> SearchInput:
        return replace(self, author_substring=text or "", page=1)

    def with_year_min(self, value: Any) -> SearchInput:
        return replace(self, year_min=parse_year(value), page=1)

    def with_year_max(self, value: Any) -> SearchInput:
        return replace(self, year_max=parse_year(value), page=1)

    def with_page(self, page: int) -> SearchInput:
        return replace(self, page=max(1, int(page)))


def parse_year(value: Any) -> int | None:
    """Coerce year filter input into an integer bound.

    Text is read like a lenient integer parse: leading whitespace and sign
    are allowed and parsing stops at the first non-digit ("1999a" -> 1999).
    Anything without leading digits means "no constraint".

    Args:
        value: Raw filter input (text, number or None).

    Returns:
        Parsed year, or None when the input carries no usable number.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    match = _LEADING_INT_RE.match(str(value))
    if match is None:
        return None
    return int(match.group(1))


def build_descriptor(search_input: SearchInput) -> QueryDescriptor | None:
    """Build the remote query for a search input.

    Returns:
        A descriptor, or None when the effective title is empty. None is a
        "no query" signal, not an error: callers show an empty result
        without touching the network.
    """
    title = search_input.effective_query_text.strip()
    if not title:
        return None
    return QueryDescriptor(effective_title=title, page=max(1, search_input.page))


def build_filter(search_input: SearchInput) -> RecordFilter:
    """Build the post-filter snapshot for a search input."""
    return RecordFilter(
        author=search_input.author_substring,
        year_min=search_input.year_min,
        year_max=search_input.year_max,
    )
