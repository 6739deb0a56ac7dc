"""Fetch orchestration with at-most-one current request.

Each dispatch takes a fresh token and cancels the task serving the
previous one. Completions compare their captured token against the latest
before emitting anything, so a superseded response can never reach the
state machine even when its transport ignores cancellation.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable

from BookFinder.core.filters import RecordFilter
from BookFinder.core.models import SearchPage
from BookFinder.core.query import QueryDescriptor
from BookFinder.core.state import (
    Cancelled,
    QueryCleared,
    QueryDispatched,
    ResponseFailed,
    ResponseReceived,
    SearchEvent,
)
from BookFinder.utils.log import log

SearchTransport = Callable[[QueryDescriptor], Awaitable[SearchPage]]
EventSink = Callable[[SearchEvent], object]


class FetchOrchestrator:
    """Issue remote searches and translate their outcome into events."""

    def __init__(
        self,
        transport: SearchTransport,
        on_event: EventSink,
        *,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            transport: Awaitable remote call for one descriptor.
            on_event: Receives lifecycle events (usually the state machine).
            loop: Event loop used to run requests; defaults to the running loop.
        """
        self._transport = transport
        self._on_event = on_event
        self._loop = loop
        self._token = 0
        self._task: asyncio.Task[None] | None = None

    @property
    def token(self) -> int:
        """Token of the request that currently owns the view."""
        return self._token

    @property
    def in_flight(self) -> bool:
        return self._task is not None and not self._task.done()

    def dispatch(self, descriptor: QueryDescriptor, post_filter: RecordFilter | None = None) -> int:
        """Start a request for ``descriptor``, superseding any earlier one.

        Args:
            descriptor: Remote query to run.
            post_filter: Client-side filter applied to the response.

        Returns:
            The token owning the new request.
        """
        self.cancel()
        self._token += 1
        token = self._token
        log.debug(
            "Dispatch token=%d title=%r page=%d",
            token,
            descriptor.effective_title,
            descriptor.page,
        )
        # The task must be tracked before listeners run: a listener may dispatch again.
        self._task = self._get_loop().create_task(
            self._run(token, descriptor, post_filter or RecordFilter())
        )
        self._on_event(QueryDispatched(token=token, descriptor=descriptor))
        return token

    def clear(self, page: int = 1) -> int:
        """Short-circuit an empty query: cancel, take a token, emit no request."""
        self.cancel()
        self._token += 1
        log.debug("Empty query short-circuit token=%d", self._token)
        self._on_event(QueryCleared(token=self._token, page=page))
        return self._token

    def cancel(self) -> None:
        """Cancel the in-flight request, if any; its result will be ignored."""
        task = self._task
        self._task = None
        if task is None or task.done():
            return
        task.cancel()
        self._on_event(Cancelled(token=self._token))

    def invalidate(self) -> None:
        """Cancel and retire the current token so no late event can apply."""
        self.cancel()
        self._token += 1

    async def wait(self) -> None:
        """Wait until no request is in flight."""
        while self._task is not None and not self._task.done():
            await asyncio.wait({self._task})

    async def _run(self, token: int, descriptor: QueryDescriptor, post_filter: RecordFilter) -> None:
        try:
            page = await self._transport(descriptor)
        except asyncio.CancelledError:
            log.debug("Request aborted: token=%d", token)
            raise
        except Exception as error:  # noqa: BLE001 - every failure becomes the error state
            if not self._is_current(token):
                log.debug("Dropping stale failure: token=%d error=%s", token, error)
                return
            message = str(error) or "Unknown error"
            log.warning("Search failed: title=%r page=%d error=%s", descriptor.effective_title, descriptor.page, message)
            self._on_event(ResponseFailed(token=token, descriptor=descriptor, message=message))
            return

        if not self._is_current(token):
            log.debug("Dropping stale response: token=%d", token)
            return

        records = post_filter.apply(page.records)
        log.info(
            "Search completed: title=%r page=%d found=%d returned=%d kept=%d",
            descriptor.effective_title,
            descriptor.page,
            page.num_found,
            len(page.records),
            len(records),
        )
        self._on_event(
            ResponseReceived(
                token=token,
                descriptor=descriptor,
                records=records,
                total_found=page.num_found or len(records),
                returned_count=len(page.records),
            )
        )

    def _is_current(self, token: int) -> bool:
        return token == self._token

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop
