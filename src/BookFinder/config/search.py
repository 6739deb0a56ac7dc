"""Search behavior configuration (the ``search`` section)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from BookFinder.config.common import expect, get_section, require


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """Store validated search behavior settings.

    Attributes:
        debounce_ms: Quiet period before typed title text is searched.
    """

    debounce_ms: int


def load_search(raw: Mapping[str, Any]) -> SearchConfig:
    """Load search configuration from the ``search`` section."""
    section = get_section(raw, "search")
    return SearchConfig(
        debounce_ms=expect(require(section, "debounce_ms", "search.debounce_ms"), int, "search.debounce_ms"),
    )


def check_search(config: SearchConfig) -> None:
    """Validate search domain constraints."""
    if config.debounce_ms <= 0:
        raise ValueError("search.debounce_ms must be positive")
