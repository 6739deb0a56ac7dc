"""Failures that end a search in the error state."""

from __future__ import annotations


class SearchError(RuntimeError):
    """Base class for remote search failures."""


class TransportError(SearchError):
    """The request could not complete (connection, timeout, TLS...)."""


class RemoteStatusError(SearchError):
    """The remote source answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        super().__init__(message or f"Open Library returned {status_code}")
        self.status_code = status_code


class PayloadError(SearchError):
    """The response body is not a usable JSON object."""
