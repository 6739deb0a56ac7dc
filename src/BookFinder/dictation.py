"""Optional speech-to-text input.

A dictation provider is any object that can deliver transcripts; binding
one feeds each transcript into the controller exactly like a typed title
followed by an explicit search.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Protocol

from BookFinder.utils.log import log

if TYPE_CHECKING:
    from BookFinder.core.controller import BookSearchController


class DictationProvider(Protocol):
    """Protocol for an external dictation capability."""

    def start(self, on_transcript: Callable[[str], None]) -> None:
        """Begin listening; call ``on_transcript`` with each final transcript."""
        raise NotImplementedError

    def stop(self) -> None:
        """Stop listening and release the capture device."""
        raise NotImplementedError


def bind_dictation(controller: BookSearchController, provider: DictationProvider) -> Callable[[], None]:
    """Route provider transcripts into the controller.

    Args:
        controller: Search controller receiving the commands.
        provider: Dictation capability to start.

    Returns:
        A callable that stops the provider.
    """

    def _on_transcript(transcript: str) -> None:
        log.info("Dictation transcript: %r", transcript)
        controller.set_query_text(transcript)
        controller.submit_now()

    provider.start(_on_transcript)
    return provider.stop
