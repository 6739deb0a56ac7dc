"""Console text output renderers.

Renders a ``SearchResultState`` into human-friendly text and provides the
ConsoleOutputWriter implementation for command output.
"""

from __future__ import annotations

from BookFinder.core.models import BookRecord, SearchResultState, SearchStatus
from BookFinder.renderers.base import OutputWriter
from BookFinder.sources.openlibrary.urls import cover_url, work_url
from BookFinder.utils.log import log

MAX_SUBJECTS = 6


def _fmt_optional(value: int | None) -> str:
    return "-" if value is None else str(value)


def render_record(idx: int, record: BookRecord) -> list[str]:
    """Render one record as an indented text block."""
    lines = [f"{idx}. {record.title}"]
    if record.author_names:
        lines.append(f"   Authors: {', '.join(record.author_names)}")
    lines.append(
        f"   First published: {_fmt_optional(record.first_publish_year)}"
        f"  Editions: {_fmt_optional(record.edition_count)}"
    )
    if record.subjects:
        lines.append(f"   Subjects: {', '.join(record.subjects[:MAX_SUBJECTS])}")
    lines.append(f"   Cover: {cover_url(record.cover_id) or 'No cover'}")
    lines.append(f"   Link: {work_url(record.id)}")
    return lines


def render_text(state: SearchResultState) -> str:
    """Render a search state into a text block.

    Args:
        state: Snapshot to render.

    Returns:
        A formatted string ready to be printed.
    """
    if state.status is SearchStatus.IDLE or (state.status is SearchStatus.SUCCESS and not state.query):
        return "Try searching for a book title.\n"
    if state.status is SearchStatus.LOADING:
        return f'Loading results for "{state.query}"...\n'
    if state.status is SearchStatus.ERROR:
        return f"Error: {state.error_message}\n"

    lines = [f'{state.total_found} found for "{state.query}" (page {state.page})', ""]
    if not state.records:
        lines.append(f'No results found for "{state.query}" with the current filters.')
    for idx, record in enumerate(state.records, start=1):
        lines.extend(render_record(idx, record))
        lines.append("")
    return "\n".join(lines).rstrip() + "\n"


class ConsoleOutputWriter(OutputWriter):
    """Write results to console via logging."""

    def write_state(self, state: SearchResultState) -> None:
        for line in render_text(state).splitlines():
            log.info(line)
