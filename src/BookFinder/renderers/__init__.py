"""Output renderers for command results.

Provides the OutputWriter base class, console and JSON implementations,
and a factory selecting one from configuration.
"""

from __future__ import annotations

from BookFinder.config import AppConfig
from BookFinder.renderers.base import OutputWriter
from BookFinder.renderers.console import ConsoleOutputWriter, render_text
from BookFinder.renderers.json import JsonOutputWriter, render_json


def create_output_writer(config: AppConfig) -> OutputWriter:
    """Create output writer based on config.

    Args:
        config: Application configuration.

    Returns:
        OutputWriter for the configured format.
    """
    if config.output.format == "json":
        return JsonOutputWriter()
    if config.output.format == "console":
        return ConsoleOutputWriter()
    raise ValueError(f"Unsupported output format: {config.output.format}")


__all__ = [
    "OutputWriter",
    "ConsoleOutputWriter",
    "JsonOutputWriter",
    "render_json",
    "render_text",
    "create_output_writer",
]
