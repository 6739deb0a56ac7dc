"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import click
from dotenv import load_dotenv

from BookFinder.cli.commands import SearchRequest
from BookFinder.cli.runner import CommandRunner
from BookFinder.config import OutputConfig, load_config
from BookFinder.config.output import OUTPUT_FORMATS


@click.group(help="BookFinder: search the Open Library catalog from the terminal.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False, exists=True),
    default=None,
    help="Path to YAML config file merged over the built-in defaults.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """CLI entry group.

    Loads environment variables from .env file before processing config.

    Args:
        ctx: Click context.
        config_path: Optional path to YAML config file.
    """
    load_dotenv()
    ctx.obj = load_config(config_path)


@cli.command("search")
@click.argument("title")
@click.option("--author", default="", help="Keep books with an author containing this text.")
@click.option("--year-min", default=None, help="Earliest first publish year.")
@click.option("--year-max", default=None, help="Latest first publish year.")
@click.option("--page", type=click.IntRange(min=1), default=1, show_default=True, help="Result page.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Override output.format from config.",
)
@click.pass_context
def search_cmd(
    ctx: click.Context,
    title: str,
    author: str,
    year_min: str | None,
    year_max: str | None,
    page: int,
    output_format: str | None,
) -> None:
    """Search books by title and print one page of results."""
    cfg = ctx.obj
    if output_format:
        cfg = replace(cfg, output=OutputConfig(format=output_format))
    request = SearchRequest(title=title, author=author, year_min=year_min, year_max=year_max, page=page)
    CommandRunner(cfg).run_search(action=ctx.command.name, request=request)


@cli.command("browse")
@click.pass_context
def browse_cmd(ctx: click.Context) -> None:
    """Search interactively, paging and filtering as you go."""
    CommandRunner(ctx.obj).run_browse(action=ctx.command.name)
