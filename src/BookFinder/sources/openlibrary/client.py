"""Open Library search API client."""

from __future__ import annotations

import threading
from typing import Any

import requests

from BookFinder.core.errors import PayloadError, RemoteStatusError, TransportError
from BookFinder.utils.log import log

OPENLIBRARY_BASE_URL = "https://openlibrary.org"
SEARCH_PATH = "/search.json"
DEFAULT_USER_AGENT = "BookFinder/0.1 (+https://openlibrary.org/developers/api)"


class OpenLibraryApiClient:
    """Low-level HTTP client for the Open Library search endpoint.

    Failures are raised as ``SearchError`` subclasses and never retried.
    Searches run on worker threads and a superseded request may still be
    running when the next one starts, so each thread gets its own session.
    """

    def __init__(
        self,
        *,
        base_url: str = OPENLIBRARY_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float | None = None,
    ) -> None:
        """Initialize the client; sessions are created per thread on first use.

        Args:
            base_url: Scheme and host of the catalog.
            user_agent: User-Agent header sent with every request.
            timeout: Request timeout in seconds; None waits indefinitely.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._headers = {
            "User-Agent": user_agent,
            "Accept": "application/json",
        }
        self._local = threading.local()
        self._sessions: list[requests.Session] = []
        self._lock = threading.Lock()

    def close(self) -> None:
        """Close every HTTP session opened by this client."""
        with self._lock:
            sessions, self._sessions = self._sessions, []
        for session in sessions:
            session.close()

    def _session(self) -> requests.Session:
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            self._local.session = session
            with self._lock:
                self._sessions.append(session)
        return session

    def fetch_search(self, *, title: str, page: int, limit: int) -> dict[str, Any]:
        """Fetch one page of title matches.

        Args:
            title: Title text to search for.
            page: 1-based result page.
            limit: Page size.

        Returns:
            Decoded JSON payload.

        Raises:
            TransportError: If the request could not complete.
            RemoteStatusError: If the response status is not 2xx.
            PayloadError: If the body is not a JSON object.
        """
        params = {
            "title": title,
            "page": str(page),
            "limit": str(limit),
        }
        url = f"{self.base_url}{SEARCH_PATH}"
        log.debug("GET %s params=%s", url, params)
        try:
            response = self._session().get(url, params=params, headers=self._headers, timeout=self.timeout)
        except requests.RequestException as error:
            raise TransportError(str(error) or type(error).__name__) from error

        if not 200 <= response.status_code < 300:
            raise RemoteStatusError(response.status_code)

        try:
            payload = response.json()
        except ValueError as error:
            raise PayloadError(f"Invalid JSON from Open Library: {error}") from error
        if not isinstance(payload, dict):
            raise PayloadError("Open Library response is not a JSON object")
        return payload
