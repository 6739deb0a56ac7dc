"""JSON output renderers."""

from __future__ import annotations

import json

import click

from BookFinder.core.models import BookRecord, SearchResultState
from BookFinder.renderers.base import OutputWriter
from BookFinder.sources.openlibrary.urls import cover_url, work_url


def render_record_json(record: BookRecord) -> dict:
    """Render one record into a JSON-serializable dict."""
    return {
        "id": record.id,
        "title": record.title,
        "authors": list(record.author_names),
        "first_publish_year": record.first_publish_year,
        "edition_count": record.edition_count,
        "cover_id": record.cover_id,
        "cover_url": cover_url(record.cover_id),
        "subjects": list(record.subjects) if record.subjects is not None else None,
        "url": work_url(record.id),
    }


def render_json(state: SearchResultState) -> dict:
    """Render a search state into a JSON-serializable dict."""
    return {
        "status": state.status.value,
        "query": state.query,
        "page": state.page,
        "total_found": state.total_found,
        "error": state.error_message,
        "has_next": state.has_next,
        "has_previous": state.has_previous,
        "records": [render_record_json(record) for record in state.records],
    }


class JsonOutputWriter(OutputWriter):
    """Print each state as a JSON document on stdout."""

    def write_state(self, state: SearchResultState) -> None:
        click.echo(json.dumps(render_json(state), ensure_ascii=False, indent=2))
