"""CLI package for BookFinder command orchestration."""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from BookFinder.cli.runner import CommandRunner
from BookFinder.cli.ui import cli


def main() -> None:
    """Run BookFinder CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
