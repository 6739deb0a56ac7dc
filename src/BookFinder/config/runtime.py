"""Logging settings (the ``log`` section)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from BookFinder.config.common import expect, expect_choice, get_section, require
from BookFinder.utils.log import LEVEL_NAMES


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """Logging behavior for one CLI run.

    Attributes:
        level: Console level name.
        to_file: Whether to mirror logs into ``dir/<action>/``.
        dir: Base directory for log files.
    """

    level: str
    to_file: bool
    dir: str


def load_runtime(raw: Mapping[str, Any]) -> RuntimeConfig:
    """Load runtime configuration from the ``log`` section."""
    section = get_section(raw, "log")
    return RuntimeConfig(
        level=expect_choice(require(section, "level", "log.level"), LEVEL_NAMES, "log.level", normalize=str.upper),
        to_file=expect(require(section, "to_file", "log.to_file"), bool, "log.to_file"),
        dir=expect(require(section, "dir", "log.dir"), str, "log.dir").strip(),
    )


def check_runtime(config: RuntimeConfig) -> None:
    """Reject a file log without a directory."""
    if config.to_file and not config.dir:
        raise ValueError("log.dir must not be empty when log.to_file is true")
