"""Command runner for coordinating CLI execution.

Manages logging configuration, event loop and transport lifecycle, and
error handling for command execution.
"""

from __future__ import annotations

import asyncio
from typing import Callable

import click

from BookFinder.cli.commands import BROWSE_HELP, SearchCommand, SearchRequest, apply_browse_line
from BookFinder.config import AppConfig
from BookFinder.core.models import SearchResultState, SearchStatus
from BookFinder.renderers import OutputWriter, create_output_writer
from BookFinder.services import create_controller, create_search_transport
from BookFinder.utils.log import configure_logging, log


def _prompt_line() -> str:
    return click.prompt("bookfinder", default="", show_default=False, prompt_suffix="> ")


class CommandRunner:
    """Orchestrates command execution with proper resource management."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def run_search(self, action: str, request: SearchRequest) -> SearchResultState:
        """Execute a one-shot search.

        Args:
            action: The CLI command name (e.g., 'search').
            request: Search parameters.

        Returns:
            The settled state.

        Raises:
            click.Abort: When the search cannot run.
            click.exceptions.Exit: With code 1 when the search ends in error.
        """
        self._configure_logging(action)
        try:
            state = asyncio.run(self._search(request, create_output_writer(self.config)))
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Search failed: %s", e)
            raise click.Abort from e

        if state.status is SearchStatus.ERROR:
            raise click.exceptions.Exit(1)
        return state

    def run_browse(self, action: str, prompt: Callable[[], str] = _prompt_line) -> None:
        """Run the interactive browse loop until the user quits.

        Args:
            action: The CLI command name (e.g., 'browse').
            prompt: Blocking line reader; raises ``click.Abort`` on EOF.
        """
        self._configure_logging(action)
        try:
            asyncio.run(self._browse(create_output_writer(self.config), prompt))
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Browse failed: %s", e)
            raise click.Abort from e

    async def _search(self, request: SearchRequest, output_writer: OutputWriter) -> SearchResultState:
        transport = create_search_transport(self.config)
        try:
            async with create_controller(self.config, transport) as controller:
                command = SearchCommand(controller=controller, output_writer=output_writer)
                return await command.execute(request)
        finally:
            transport.close()

    async def _browse(self, output_writer: OutputWriter, prompt: Callable[[], str]) -> None:
        transport = create_search_transport(self.config)
        log.info(BROWSE_HELP)
        try:
            async with create_controller(self.config, transport) as controller:
                while True:
                    try:
                        line = await asyncio.to_thread(prompt)
                    except (click.Abort, EOFError):
                        break
                    if not apply_browse_line(controller, line):
                        break
                    await controller.wait()
                    output_writer.write_state(controller.current_state())
        finally:
            transport.close()

    def _configure_logging(self, action: str) -> None:
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
