"""Link helpers for presenting Open Library records."""

from __future__ import annotations

COVERS_BASE_URL = "https://covers.openlibrary.org"
_COVER_SIZES = {"S", "M", "L"}


def cover_url(cover_id: int | None, size: str = "M") -> str | None:
    """Return the cover image URL for ``cover_id``, or None without a cover."""
    if not cover_id:
        return None
    size = size.upper()
    if size not in _COVER_SIZES:
        raise ValueError(f"Unsupported cover size: {size}")
    return f"{COVERS_BASE_URL}/b/id/{cover_id}-{size}.jpg"


def work_url(key: str, base_url: str = "https://openlibrary.org") -> str:
    """Return the catalog page URL for a record key such as ``/works/OL1W``."""
    if not key.startswith("/"):
        key = f"/{key}"
    return f"{base_url.rstrip('/')}{key}"
