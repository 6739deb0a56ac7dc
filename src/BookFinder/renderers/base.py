"""Base class for output writers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from BookFinder.core.models import SearchResultState


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_state(self, state: SearchResultState) -> None:
        """Write one settled search state.

        Args:
            state: Snapshot to present.
        """
