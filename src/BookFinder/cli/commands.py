"""Command implementations for BookFinder CLI.

Translate CLI input into controller commands, separated from CLI
parameter handling and process lifecycle.
"""

from __future__ import annotations

from dataclasses import dataclass

from BookFinder.core.controller import BookSearchController
from BookFinder.core.models import SearchResultState
from BookFinder.renderers import OutputWriter
from BookFinder.utils.log import log


@dataclass(frozen=True, slots=True)
class SearchRequest:
    """One-shot search parameters as given on the command line."""

    title: str
    author: str = ""
    year_min: str | None = None
    year_max: str | None = None
    page: int = 1


@dataclass(slots=True)
class SearchCommand:
    """Run a single search through the controller and write the settled state."""

    controller: BookSearchController
    output_writer: OutputWriter

    async def execute(self, request: SearchRequest) -> SearchResultState:
        """Apply filters, submit the title and wait for the result.

        Args:
            request: Search parameters.

        Returns:
            The settled state.
        """
        controller = self.controller
        controller.set_author_filter(request.author)
        controller.set_year_min(request.year_min)
        controller.set_year_max(request.year_max)
        controller.set_query_text(request.title)
        controller.submit_now(page=request.page)

        await controller.wait()
        state = controller.current_state()
        self.output_writer.write_state(state)
        return state


BROWSE_HELP = (
    "Type a title to search, or a command: "
    ":author TEXT, :from YEAR, :to YEAR, :page N, :next, :prev, :reset, :quit"
)


def apply_browse_line(controller: BookSearchController, line: str) -> bool:
    """Apply one interactive input line to the controller.

    Args:
        controller: Target controller.
        line: Raw line typed by the user.

    Returns:
        False when the user asked to quit, True otherwise.
    """
    text = line.strip()
    if not text.startswith(":"):
        controller.set_query_text(text)
        controller.submit_now()
        return True

    name, _, arg = text[1:].partition(" ")
    name = name.lower()
    arg = arg.strip()
    if name in {"q", "quit", "exit"}:
        return False
    if name == "author":
        controller.set_author_filter(arg)
    elif name == "from":
        controller.set_year_min(arg or None)
    elif name == "to":
        controller.set_year_max(arg or None)
    elif name == "page":
        if not arg.isdigit():
            log.warning("Usage: :page N")
        else:
            controller.go_to_page(int(arg))
    elif name == "next":
        if not controller.next():
            log.info("No next page")
    elif name == "prev":
        if not controller.prev():
            log.info("Already on the first page")
    elif name == "reset":
        controller.reset()
    else:
        log.warning("Unknown command: :%s", name)
        log.info(BROWSE_HELP)
    return True
