"""Output format selection (the ``output`` section)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from BookFinder.config.common import expect_choice, get_section, require

OUTPUT_FORMATS = ("console", "json")


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """How settled search states are printed."""

    format: str


def load_output(raw: Mapping[str, Any]) -> OutputConfig:
    section = get_section(raw, "output")
    return OutputConfig(format=expect_choice(require(section, "format", "output.format"), OUTPUT_FORMATS, "output.format"))
