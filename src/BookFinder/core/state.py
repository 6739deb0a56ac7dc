"""Search state machine.

Holds the single current ``SearchResultState`` and applies named lifecycle
events emitted by the fetch orchestrator. Every event carries the request
token it belongs to; events for any token other than the latest dispatched
one are discarded.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Union

from BookFinder.core.models import BookRecord, SearchResultState, SearchStatus
from BookFinder.core.query import QueryDescriptor
from BookFinder.utils.log import log


@dataclass(frozen=True, slots=True)
class QueryDispatched:
    token: int
    descriptor: QueryDescriptor


@dataclass(frozen=True, slots=True)
class QueryCleared:
    """Empty-title short-circuit: no request was issued."""

    token: int
    page: int = 1


@dataclass(frozen=True, slots=True)
class ResponseReceived:
    token: int
    descriptor: QueryDescriptor
    records: tuple[BookRecord, ...]
    total_found: int
    returned_count: int


@dataclass(frozen=True, slots=True)
class ResponseFailed:
    token: int
    descriptor: QueryDescriptor
    message: str


@dataclass(frozen=True, slots=True)
class Cancelled:
    token: int


SearchEvent = Union[QueryDispatched, QueryCleared, ResponseReceived, ResponseFailed, Cancelled]
StateListener = Callable[[SearchResultState], None]


class SearchStateMachine:
    """Single source of truth consumed by presentation."""

    def __init__(self) -> None:
        self._state = SearchResultState()
        self._current_token: int | None = None
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> SearchResultState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener called with every new snapshot.

        Returns:
            A callable that removes the listener.
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def reset(self) -> SearchResultState:
        """Return to the initial IDLE snapshot and forget the current token."""
        self._current_token = None
        return self._publish(SearchResultState())

    def handle(self, event: SearchEvent) -> SearchResultState:
        """Apply one lifecycle event and return the resulting snapshot."""
        if isinstance(event, QueryDispatched):
            self._current_token = event.token
            return self._publish(
                SearchResultState(
                    status=SearchStatus.LOADING,
                    page=event.descriptor.page,
                    query=event.descriptor.effective_title,
                )
            )

        if isinstance(event, QueryCleared):
            self._current_token = event.token
            return self._publish(SearchResultState(status=SearchStatus.SUCCESS, page=event.page))

        if isinstance(event, Cancelled):
            log.debug("Request cancelled: token=%d", event.token)
            return self._state

        if event.token != self._current_token:
            log.debug("Dropping stale event: token=%d current=%s", event.token, self._current_token)
            return self._state

        if isinstance(event, ResponseReceived):
            return self._publish(
                SearchResultState(
                    status=SearchStatus.SUCCESS,
                    records=event.records,
                    total_found=event.total_found,
                    page=event.descriptor.page,
                    query=event.descriptor.effective_title,
                    returned_count=event.returned_count,
                )
            )

        if isinstance(event, ResponseFailed):
            return self._publish(
                SearchResultState(
                    status=SearchStatus.ERROR,
                    page=event.descriptor.page,
                    error_message=event.message,
                    query=event.descriptor.effective_title,
                )
            )

        raise TypeError(f"Unsupported search event: {type(event).__name__}")

    def _publish(self, state: SearchResultState) -> SearchResultState:
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception as error:  # noqa: BLE001 - listener failure must be isolated
                log.warning("State listener failed: %s", error)
        return state
