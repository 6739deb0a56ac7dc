"""Debounced commit of raw title input.

Rapid keystrokes restart a single timer; only the text that survives a
quiet period reaches downstream.
"""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Protocol

from BookFinder.utils.log import log

DEFAULT_DELAY = 0.3


class TimerHandle(Protocol):
    def cancel(self) -> None:
        ...


class Scheduler(Protocol):
    """Anything that can run a callback later (``asyncio`` loops qualify)."""

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> TimerHandle:
        ...


class Debouncer:
    """Delay propagation of text until input has been quiet for ``delay`` seconds."""

    def __init__(
        self,
        on_commit: Callable[[str], None],
        *,
        delay: float = DEFAULT_DELAY,
        scheduler: Scheduler | None = None,
    ) -> None:
        """Initialize a debouncer.

        Args:
            on_commit: Receives the trimmed settled text.
            delay: Quiet period in seconds.
            scheduler: Timer source; defaults to the running event loop.
        """
        self.delay = delay
        self._on_commit = on_commit
        self._scheduler = scheduler
        self._handle: TimerHandle | None = None
        self._closed = False

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def notify(self, text: str) -> None:
        """Restart the quiet-period timer with the latest text."""
        if self._closed:
            return
        self._cancel_timer()
        self._handle = self._get_scheduler().call_later(self.delay, self._fire, text)

    def flush(self, text: str) -> None:
        """Cancel any pending timer and commit ``text`` immediately."""
        if self._closed:
            return
        self._cancel_timer()
        self._commit(text)

    def cancel(self) -> None:
        """Drop the pending timer without committing."""
        self._cancel_timer()

    def close(self) -> None:
        """Tear down: no commit is emitted after this call."""
        self._cancel_timer()
        self._closed = True

    def _fire(self, text: str) -> None:
        self._handle = None
        if self._closed:
            return
        self._commit(text)

    def _commit(self, text: str) -> None:
        trimmed = text.strip()
        log.debug("Debounced commit: %r", trimmed)
        self._on_commit(trimmed)

    def _cancel_timer(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _get_scheduler(self) -> Scheduler:
        if self._scheduler is None:
            self._scheduler = asyncio.get_running_loop()
        return self._scheduler
