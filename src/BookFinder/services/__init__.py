"""Service layer for BookFinder.

Wires the configured catalog source into the async transport consumed by
the search controller.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from BookFinder.services.search import BookSource, ThreadedSearchTransport

if TYPE_CHECKING:
    from BookFinder.config import AppConfig
    from BookFinder.core.controller import BookSearchController


def create_search_transport(config: AppConfig) -> ThreadedSearchTransport:
    """Create the Open Library transport described by ``config.api``.

    Args:
        config: Application configuration.

    Returns:
        Transport ready to pass to ``BookSearchController``.
    """
    from BookFinder.sources.openlibrary.client import OpenLibraryApiClient
    from BookFinder.sources.openlibrary.source import OpenLibrarySource

    user_agent = config.api.user_agent
    contact = os.getenv(config.api.contact_env, "").strip() if config.api.contact_env else ""
    if contact:
        user_agent = f"{user_agent} {contact}"

    client = OpenLibraryApiClient(
        base_url=config.api.base_url,
        user_agent=user_agent,
        timeout=config.api.timeout,
    )
    return ThreadedSearchTransport(source=OpenLibrarySource(client=client))


def create_controller(config: AppConfig, transport: ThreadedSearchTransport) -> BookSearchController:
    """Create a search controller using configured debounce settings."""
    from BookFinder.core.controller import BookSearchController

    return BookSearchController(transport, debounce_delay=config.search.debounce_ms / 1000)


__all__ = [
    "BookSource",
    "ThreadedSearchTransport",
    "create_controller",
    "create_search_transport",
]
