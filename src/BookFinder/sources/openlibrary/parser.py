"""Open Library search payload parser."""

from __future__ import annotations

from typing import Any, Mapping

from BookFinder.core.models import BookRecord, SearchPage


def parse_search_payload(payload: Mapping[str, Any]) -> SearchPage:
    """Parse a ``/search.json`` payload into a ``SearchPage``.

    Documents without a string ``key`` are skipped; other fields are
    optional and ill-typed values are treated as absent.
    """
    docs = payload.get("docs")
    records: list[BookRecord] = []
    if isinstance(docs, list):
        for doc in docs:
            if isinstance(doc, Mapping):
                record = parse_doc(doc)
                if record is not None:
                    records.append(record)

    return SearchPage(num_found=_safe_int(payload.get("numFound")) or 0, records=tuple(records))


def parse_doc(doc: Mapping[str, Any]) -> BookRecord | None:
    """Parse a single search document into a ``BookRecord``."""
    key = _safe_str(doc.get("key"))
    if not key:
        return None

    subjects_raw = doc.get("subject")
    subjects = _collect_str_list(subjects_raw) if isinstance(subjects_raw, list) else None

    return BookRecord(
        id=key,
        title=_safe_str(doc.get("title")),
        author_names=_collect_str_list(doc.get("author_name")),
        first_publish_year=_safe_int(doc.get("first_publish_year")),
        edition_count=_safe_int(doc.get("edition_count")),
        cover_id=_safe_int(doc.get("cover_i")),
        subjects=subjects,
    )


def _collect_str_list(value: Any) -> tuple[str, ...]:
    """Collect non-empty strings from list-like values."""
    if not isinstance(value, list):
        return ()
    return tuple(text for text in (_safe_str(item) for item in value) if text)


def _safe_int(value: Any) -> int | None:
    """Return value if it is a real integer (bool excluded)."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def _safe_str(value: Any) -> str:
    """Convert scalar value to stripped string."""
    if isinstance(value, str):
        return value.strip()
    return ""
