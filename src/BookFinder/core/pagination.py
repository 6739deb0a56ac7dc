"""Page navigation for the current title query."""

from __future__ import annotations

from dataclasses import dataclass

from BookFinder.core.models import SearchResultState


@dataclass(slots=True)
class PaginationController:
    """Track the current page and decide whether next/prev are enabled."""

    page: int = 1

    def reset(self) -> None:
        self.page = 1

    def go_to(self, page: int) -> bool:
        """Move to ``page`` (floored at 1). Returns True if the page changed."""
        target = max(1, int(page))
        if target == self.page:
            return False
        self.page = target
        return True

    def can_advance(self, state: SearchResultState) -> bool:
        """Next is enabled only when the current page returned records."""
        return state.page == self.page and state.has_next

    def can_go_back(self) -> bool:
        return self.page > 1

    def advance(self, state: SearchResultState) -> bool:
        if not self.can_advance(state):
            return False
        self.page += 1
        return True

    def go_back(self) -> bool:
        if not self.can_go_back():
            return False
        self.page -= 1
        return True
