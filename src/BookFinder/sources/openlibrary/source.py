"""Open Library source adapter."""

from __future__ import annotations

from dataclasses import dataclass

from BookFinder.core.models import SearchPage
from BookFinder.core.query import QueryDescriptor
from BookFinder.sources.openlibrary.client import OpenLibraryApiClient
from BookFinder.sources.openlibrary.parser import parse_search_payload


@dataclass(slots=True)
class OpenLibrarySource:
    """Open Library-backed source returning parsed result pages."""

    client: OpenLibraryApiClient
    name: str = "openlibrary"

    def search(self, descriptor: QueryDescriptor) -> SearchPage:
        """Run one title search.

        Args:
            descriptor: Title, page and page size to request.

        Returns:
            The parsed page, unfiltered.
        """
        payload = self.client.fetch_search(
            title=descriptor.effective_title,
            page=descriptor.page,
            limit=descriptor.page_size,
        )
        return parse_search_payload(payload)

    def close(self) -> None:
        """Close resources held by the source adapter."""
        self.client.close()
