"""Async transport over blocking book sources."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Protocol

from BookFinder.core.models import SearchPage
from BookFinder.core.query import QueryDescriptor
from BookFinder.utils.log import log


class BookSource(Protocol):
    """Protocol for an external book catalog."""

    name: str

    def search(self, descriptor: QueryDescriptor) -> SearchPage:
        """Fetch and parse one result page."""
        raise NotImplementedError

    def close(self) -> None:
        """Close resources held by source."""
        raise NotImplementedError


@dataclass(slots=True)
class ThreadedSearchTransport:
    """Run a blocking source in a worker thread so the event loop stays free.

    Cancelling the awaiting task abandons the worker's result; the thread
    finishes its request and the late page is discarded by the caller's
    token check.
    """

    source: BookSource

    async def __call__(self, descriptor: QueryDescriptor) -> SearchPage:
        try:
            return await asyncio.to_thread(self.source.search, descriptor)
        except asyncio.CancelledError:
            log.debug(
                "Abandoning %s request: title=%r page=%d",
                self.source.name,
                descriptor.effective_title,
                descriptor.page,
            )
            raise

    def close(self) -> None:
        """Close the wrapped source."""
        self.source.close()
