from __future__ import annotations

"""Validation helpers shared by the config domains.

Type mismatches raise ``TypeError`` and out-of-range values raise
``ValueError``; both name the dotted config key.
"""

from typing import Any, Callable, Collection, Mapping

_KIND_NAMES = {str: "a string", bool: "a boolean", int: "an integer"}


def get_section(raw: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    """Return a required top-level section.

    Raises:
        ValueError: If the section is missing.
        TypeError: If the section is not a mapping.
    """
    section = raw.get(key)
    if section is None:
        raise ValueError(f"Missing required config: {key}")
    if not isinstance(section, Mapping):
        raise TypeError(f"{key} must be an object")
    return section


def require(section: Mapping[str, Any], field: str, config_key: str) -> Any:
    """Return ``section[field]`` or raise ``ValueError`` naming ``config_key``."""
    if field not in section:
        raise ValueError(f"Missing required config: {config_key}")
    return section[field]


def expect(value: Any, kind: type, config_key: str) -> Any:
    """Return ``value`` if it is a ``kind`` (str, bool or int).

    Booleans are never accepted as integers.
    """
    if (kind is not bool and isinstance(value, bool)) or not isinstance(value, kind):
        raise TypeError(f"{config_key} must be {_KIND_NAMES.get(kind, kind.__name__)}")
    return value


def expect_choice(
    value: Any,
    choices: Collection[str],
    config_key: str,
    *,
    normalize: Callable[[str], str] = str.lower,
) -> str:
    """Validate a case-insensitive enumerated string and return it normalized."""
    text = normalize(expect(value, str, config_key).strip())
    if text not in choices:
        raise ValueError(f"{config_key} must be one of {sorted(choices)}")
    return text


def expect_seconds(value: Any, config_key: str) -> float | None:
    """Validate a positive duration in seconds; null means "no limit"."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{config_key} must be a number of seconds or null")
    if value <= 0:
        raise ValueError(f"{config_key} must be positive or null")
    return float(value)
