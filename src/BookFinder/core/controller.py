"""Search-state controller exposed to presentation layers.

Turns raw keystrokes into one debounced, cancellable remote query, routes
filter and page edits back through the query builder, and publishes a
single ``SearchResultState`` snapshot.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Callable

from BookFinder.core.debounce import DEFAULT_DELAY, Debouncer, Scheduler
from BookFinder.core.models import SearchResultState
from BookFinder.core.orchestrator import FetchOrchestrator, SearchTransport
from BookFinder.core.pagination import PaginationController
from BookFinder.core.query import SearchInput, build_descriptor, build_filter
from BookFinder.core.state import SearchStateMachine, StateListener
from BookFinder.utils.log import log


class BookSearchController:
    """Commands in, ``SearchResultState`` snapshots out.

    Must be driven from a single event loop thread.
    """

    def __init__(
        self,
        transport: SearchTransport,
        *,
        debounce_delay: float = DEFAULT_DELAY,
        scheduler: Scheduler | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            transport: Awaitable remote search call.
            debounce_delay: Quiet period for title input, in seconds.
            scheduler: Timer source for debouncing; defaults to the running loop.
        """
        self._input = SearchInput()
        self._machine = SearchStateMachine()
        self._orchestrator = FetchOrchestrator(transport, self._machine.handle)
        self._debouncer = Debouncer(self._on_commit, delay=debounce_delay, scheduler=scheduler)
        self._pagination = PaginationController()
        self._forced_commit = False
        self._commit_page = 1
        self._closed = False

    async def __aenter__(self) -> BookSearchController:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def search_input(self) -> SearchInput:
        return self._input

    def current_state(self) -> SearchResultState:
        return self._machine.state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Deliver every new state snapshot to ``listener``."""
        return self._machine.subscribe(listener)

    def set_query_text(self, text: str) -> None:
        self._ensure_open()
        self._input = self._input.with_raw_text(text)
        self._debouncer.notify(text)

    def submit_now(self, *, page: int = 1) -> None:
        """Commit the typed title immediately, re-running it even if unchanged.

        Args:
            page: Page to open the new search on.
        """
        self._ensure_open()
        self._forced_commit = True
        self._commit_page = page
        try:
            self._debouncer.flush(self._input.raw_query_text)
        finally:
            self._forced_commit = False
            self._commit_page = 1

    def set_author_filter(self, text: str) -> None:
        self._update_filters(self._input.with_author(text))

    def set_year_min(self, value: Any) -> None:
        self._update_filters(self._input.with_year_min(value))

    def set_year_max(self, value: Any) -> None:
        self._update_filters(self._input.with_year_max(value))

    def reset(self) -> None:
        """Clear title, filters and page and return to IDLE."""
        self._ensure_open()
        self._debouncer.cancel()
        self._orchestrator.invalidate()
        self._input = SearchInput()
        self._pagination.reset()
        self._machine.reset()

    def go_to_page(self, page: int) -> None:
        self._ensure_open()
        if self._pagination.go_to(page):
            self._load_page()

    def next(self) -> bool:
        """Advance one page. Returns False (no-op) when next is disabled."""
        self._ensure_open()
        if not self._pagination.advance(self._machine.state):
            log.debug("Next page disabled at page=%d", self._pagination.page)
            return False
        self._load_page()
        return True

    def prev(self) -> bool:
        """Go back one page. Returns False (no-op) on page 1."""
        self._ensure_open()
        if not self._pagination.go_back():
            return False
        self._load_page()
        return True

    async def wait(self) -> None:
        """Wait until the current request (if any) has settled."""
        await self._orchestrator.wait()

    def close(self) -> None:
        """Tear down: cancel the pending commit and the in-flight request."""
        if self._closed:
            return
        self._closed = True
        self._debouncer.close()
        self._orchestrator.invalidate()

    def _on_commit(self, text: str) -> None:
        if not self._forced_commit and text and text == self._input.effective_query_text:
            log.debug("Committed title unchanged: %r", text)
            return
        self._pagination.reset()
        self._pagination.go_to(self._commit_page)
        self._input = self._input.with_committed_title(text).with_page(self._pagination.page)
        self._refresh()

    def _update_filters(self, updated: SearchInput) -> None:
        self._ensure_open()
        if replace(updated, page=self._input.page) == self._input:
            return
        self._input = updated
        self._pagination.reset()
        self._refresh()

    def _load_page(self) -> None:
        self._input = self._input.with_page(self._pagination.page)
        self._refresh()

    def _refresh(self) -> None:
        descriptor = build_descriptor(self._input)
        if descriptor is None:
            self._orchestrator.clear(page=self._input.page)
            return
        self._orchestrator.dispatch(descriptor, build_filter(self._input))

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("BookSearchController is closed")
