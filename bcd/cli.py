"""Console script for pybcd."""

from __future__ import annotations

import json
import logging
from typing import Any

import click
from rich.console import Console

from . import __version__ as _version
from .browsers import build_catalog
from .constants import DEFAULT_TIMEOUT_SECONDS, FULL_TOP_LEVEL_SCHEMA
from .exceptions import BcdError
from .http import use_shared_client
from .loader import load_document
from .query import search
from .render_basic import render_browsers, render_feature, render_summary
from .schema import TopLevelSchema, build_schema, discover_schema, parse_schema_option
from .support import FOLD_POLICIES, FoldPolicy
from .util.debug import debug_enabled
from .walker import find_duplicates, walk

_SOURCE_ARGUMENT = click.argument("source", metavar="<path-or-url>")
_TIMEOUT_OPTION = click.option(
    "--timeout",
    type=float,
    default=DEFAULT_TIMEOUT_SECONDS,
    show_default=True,
    help="Network timeout in seconds for URL sources.",
)


def _load(source: str, timeout: float) -> dict[str, Any]:
    try:
        with use_shared_client(timeout):
            return load_document(source, timeout=timeout)
    except BcdError as exc:
        raise click.ClickException(str(exc)) from exc


def _select_schema(
    document: dict[str, Any], categories: tuple[str, ...], full: bool, everything: bool
) -> TopLevelSchema | None:
    if everything:
        return discover_schema(document)
    if categories:
        return parse_schema_option(categories)
    if full:
        return build_schema(FULL_TOP_LEVEL_SCHEMA)
    return None


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(_version, "-v", "--version")
def main() -> None:
    """
    Extract feature records from MDN browser-compat-data

    \b
    Example usages:
      pybcd walk data.json
      pybcd walk data.json --category css:properties --json
      pybcd show data.json css.properties.gap
      pybcd browsers data.json
      pybcd walk https://unpkg.com/@mdn/browser-compat-data/data.json
    """
    logging.basicConfig(level=logging.DEBUG if debug_enabled() else logging.WARNING)


@main.command("walk")
@_SOURCE_ARGUMENT
@click.option(
    "--category",
    "categories",
    multiple=True,
    metavar="CATEGORY:SUB[,SUB...]",
    help="Roots to walk; repeatable. Defaults to css:at-rules,properties.",
)
@click.option("--full", is_flag=True, help="Walk the full css/html/javascript schema.")
@click.option("--all", "everything", is_flag=True, help="Walk every category in the document.")
@click.option("--deepest", is_flag=True, help="Only emit the most specific compat nodes.")
@click.option("--jobs", type=click.IntRange(min=1), default=1, show_default=True)
@click.option("--json", "as_json", is_flag=True, help="Print one JSON record per line.")
@click.option("--search", "query", default=None, help="Only show features matching a name search.")
@_TIMEOUT_OPTION
def walk_command(
    source: str,
    categories: tuple[str, ...],
    full: bool,
    everything: bool,
    deepest: bool,
    jobs: int,
    as_json: bool,
    query: str | None,
    timeout: float,
) -> None:
    """Walk a compat document and list the extracted features."""
    document = _load(source, timeout)
    try:
        schema = _select_schema(document, categories, full, everything)
        records = walk(document, schema, policy="deepest" if deepest else "all", jobs=jobs)
    except BcdError as exc:
        raise click.ClickException(str(exc)) from exc

    if query:
        records = search(records, query)

    duplicates = find_duplicates(records)

    if as_json:
        for record in records:
            click.echo(json.dumps(record.to_dict(), ensure_ascii=False))
    else:
        console = Console()
        console.print(render_summary(records, catalog=build_catalog(document)))

    if duplicates:
        click.echo(
            f"Warning: {len(duplicates)} duplicate feature slug(s): {', '.join(duplicates)}",
            err=True,
        )


def _schema_for_name(name: str) -> TopLevelSchema | None:
    segments = name.split(".")
    if len(segments) < 2 or not all(segments):
        return None
    return build_schema({segments[0]: [segments[1]]})


@main.command("show")
@_SOURCE_ARGUMENT
@click.argument("name")
@click.option(
    "--policy",
    type=click.Choice(FOLD_POLICIES),
    default="any",
    show_default=True,
    help="How multiple support windows fold into one answer.",
)
@_TIMEOUT_OPTION
def show_command(source: str, name: str, policy: FoldPolicy, timeout: float) -> None:
    """Show one feature by its dotted name."""
    document = _load(source, timeout)
    record = None
    try:
        schema = _schema_for_name(name)
        if schema is not None:
            record = next((item for item in walk(document, schema) if item.name == name), None)
    except BcdError as exc:
        raise click.ClickException(str(exc)) from exc
    if record is None:
        raise click.ClickException(f"No feature named {name!r}")

    console = Console()
    console.print(render_feature(record, build_catalog(document), policy))


@main.command("browsers")
@_SOURCE_ARGUMENT
@_TIMEOUT_OPTION
def browsers_command(source: str, timeout: float) -> None:
    """List the browsers known to a compat document."""
    document = _load(source, timeout)
    console = Console()
    console.print(render_browsers(build_catalog(document)))
