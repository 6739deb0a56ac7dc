"""Remote catalog configuration (the ``api`` section)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from BookFinder.config.common import expect, expect_seconds, get_section, require


@dataclass(frozen=True, slots=True)
class ApiConfig:
    """Store validated Open Library connection settings.

    Attributes:
        base_url: Catalog scheme and host.
        timeout: Request timeout in seconds, or None for no timeout.
        user_agent: User-Agent header value.
        contact_env: Environment variable whose value is appended to the
            User-Agent when set. Empty disables the lookup.
    """

    base_url: str
    timeout: float | None
    user_agent: str
    contact_env: str


def load_api(raw: Mapping[str, Any]) -> ApiConfig:
    """Load API configuration from the ``api`` section."""
    section = get_section(raw, "api")
    return ApiConfig(
        base_url=expect(require(section, "base_url", "api.base_url"), str, "api.base_url").strip(),
        timeout=expect_seconds(section.get("timeout"), "api.timeout"),
        user_agent=expect(require(section, "user_agent", "api.user_agent"), str, "api.user_agent").strip(),
        contact_env=expect(section.get("contact_env", ""), str, "api.contact_env").strip(),
    )


def check_api(config: ApiConfig) -> None:
    """Validate API domain constraints."""
    if not config.base_url.startswith(("http://", "https://")):
        raise ValueError("api.base_url must start with http:// or https://")
    if not config.user_agent:
        raise ValueError("api.user_agent must not be empty")
