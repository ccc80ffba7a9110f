"""Typer-based CLI for querying and editing HTML documents by tag."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import requests
import typer
from bs4 import FeatureNotFound

from .batch import load_manager, read_sources
from .cursor import Cursor
from .errors import FlattenHTMLError
from .filters import with_attribute, with_attribute_value
from .iterator import FilterOption, NodeIterator
from .manager import ManagerOptions, NodeManager
from .reporting import categories_to_dataframe, counts_by_key, export_csv, summarize_sources
from .tag_flattener import TagFlattener

logger = logging.getLogger(__name__)

app = typer.Typer(help="Flatten HTML documents once and look nodes up by tag.")

_LOAD_ERRORS = (requests.RequestException, OSError, FeatureNotFound, FlattenHTMLError)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    parser: str = typer.Option("html5lib", "--parser", help="BeautifulSoup tree builder (html5lib, lxml, html.parser)"),
) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)
    ctx.obj = ManagerOptions(features=parser)


def _attribute_filters(specs: Optional[List[str]]) -> List[FilterOption]:
    options: List[FilterOption] = []
    for spec in specs or []:
        key, sep, value = spec.partition("=")
        if not key:
            raise typer.BadParameter(f"Invalid attribute filter: {spec!r}")
        options.append(with_attribute_value(key, value) if sep else with_attribute(key))
    return options


def _load(ctx: typer.Context, source: str) -> NodeManager:
    try:
        return load_manager(source, options=ctx.obj)
    except _LOAD_ERRORS as exc:
        typer.echo(f"Error: cannot load {source}: {exc}", err=True)
        raise typer.Exit(code=1)


def _tag_cursor(manager: NodeManager) -> Cursor:
    return manager.parse(TagFlattener()).select_cursor(TagFlattener())


def _select(cursor: Cursor, tag: str, attrs: Optional[List[str]], match_any: bool) -> NodeIterator:
    nodes = cursor.select_nodes(tag)
    options = _attribute_filters(attrs)
    if not options:
        return nodes
    if match_any:
        return nodes.filter_or(*options)
    return nodes.filter_and(*options)


@app.command()
def tags(
    ctx: typer.Context,
    source: str = typer.Argument(..., help="Path to an HTML file or an http(s) URL"),
    csv_path: Optional[Path] = typer.Option(None, "--csv", dir_okay=False, help="Also write the counts to this CSV file"),
) -> None:
    """List the tags of a document with the number of elements for each."""
    cursor = _tag_cursor(_load(ctx, source))
    frame = categories_to_dataframe(cursor)
    for key, count in frame.itertuples(index=False, name=None):
        typer.echo(f"{key}\t{count}")
    if csv_path:
        export_csv(frame, csv_path)
        logger.info("Saved counts to %s", csv_path)


@app.command()
def select(
    ctx: typer.Context,
    source: str = typer.Argument(..., help="Path to an HTML file or an http(s) URL"),
    tag: str = typer.Argument(..., help="Tag name to select"),
    attr: Optional[List[str]] = typer.Option(None, "--attr", "-a", help="KEY or KEY=VALUE attribute filter"),
    match_any: bool = typer.Option(False, "--any", help="Keep nodes matching any filter instead of all"),
) -> None:
    """Print the markup of every element with the given tag."""
    cursor = _tag_cursor(_load(ctx, source))
    for node in _select(cursor, tag, attr, match_any):
        typer.echo(str(node.element))


@app.command()
def remove(
    ctx: typer.Context,
    source: str = typer.Argument(..., help="Path to an HTML file or an http(s) URL"),
    tag: str = typer.Argument(..., help="Tag name to remove"),
    attr: Optional[List[str]] = typer.Option(None, "--attr", "-a", help="KEY or KEY=VALUE attribute filter"),
    match_any: bool = typer.Option(False, "--any", help="Remove nodes matching any filter instead of all"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", dir_okay=False, help="Write the result here instead of stdout"),
) -> None:
    """Remove matching elements and render the resulting document."""
    manager = _load(ctx, source)
    cursor = _tag_cursor(manager)
    removed = 0
    for node in _select(cursor, tag, attr, match_any):
        try:
            node.remove()
        except FlattenHTMLError as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(code=1)
        removed += 1
    logger.info("Removed %s <%s> element(s)", removed, tag)
    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        with output.open("wb") as handle:
            manager.render(handle)
    else:
        typer.echo(manager.render_string())


@app.command()
def batch(
    ctx: typer.Context,
    batch_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Text/CSV/JSON list of paths or URLs"),
    csv_path: Optional[Path] = typer.Option(None, "--csv", dir_okay=False, help="Also write the table to this CSV file"),
) -> None:
    """Count tags across a list of documents."""
    try:
        sources = read_sources(batch_file)
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    counts = {}
    for index, source in enumerate(sources, start=1):
        logger.info("[%s/%s] Processing %s", index, len(sources), source)
        try:
            manager = load_manager(source, options=ctx.obj)
        except _LOAD_ERRORS as exc:
            logger.warning("Failed to process %s: %s", source, exc)
            continue
        counts[source] = counts_by_key(_tag_cursor(manager))

    frame = summarize_sources(counts)
    typer.echo(frame.to_string())
    if csv_path:
        export_csv(frame, csv_path, index=True)
        logger.info("Saved summary to %s", csv_path)


if __name__ == "__main__":
    app()
