"""Offline commands that run discovery and utility calls through the router.

Every command builds the same :class:`monolith.tools.Tools` provider the MCP
server uses and prints the router payload as JSON, so the output matches what
an MCP client would receive.
"""

from __future__ import annotations

import json
from typing import Any

import click

from ..dispatch import ToolOutcome
from ..tools import Tools

catalog_option = click.option(
    "--catalog",
    "catalog_path",
    envvar="MONOLITH_CATALOG",
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=str),
    help="Alternative function catalog YAML file (env: MONOLITH_CATALOG)",
)


def _run(catalog_path: str | None, name: str, arguments: dict[str, Any]) -> None:
    outcome: ToolOutcome = Tools(catalog_path=catalog_path).dispatcher.dispatch(
        name, arguments
    )
    click.echo(outcome.to_text())
    if outcome.is_error:
        raise SystemExit(1)


@click.command("search")
@click.argument("query", type=str)
@click.option("--category", default=None, help="Restrict results to one category")
@catalog_option
def search_cmd(query: str, category: str | None, catalog_path: str | None):
    """Search the function catalog for QUERY."""
    arguments: dict[str, Any] = {"query": query}
    if category is not None:
        arguments["category"] = category
    _run(catalog_path, "search_functions", arguments)


@click.command("categories")
@catalog_option
def categories_cmd(catalog_path: str | None):
    """List categories with their function counts."""
    _run(catalog_path, "list_categories", {})


@click.command("describe")
@click.argument("name", type=str)
@catalog_option
def describe_cmd(name: str, catalog_path: str | None):
    """Show the full catalog entry for NAME."""
    _run(catalog_path, "describe_function", {"name": name})


@click.command("call")
@click.argument("name", type=str)
@click.option(
    "--args",
    "raw_args",
    default="{}",
    show_default=True,
    help="Tool arguments as a JSON object",
)
@catalog_option
def call_cmd(name: str, raw_args: str, catalog_path: str | None):
    """Invoke tool NAME with JSON arguments.

    Exits with status 1 when the call takes the tool error path.
    """
    try:
        arguments = json.loads(raw_args)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"not valid JSON: {e}", param_hint="--args") from e
    if not isinstance(arguments, dict):
        raise click.BadParameter("must be a JSON object", param_hint="--args")
    _run(catalog_path, name, arguments)


__all__ = ["call_cmd", "categories_cmd", "describe_cmd", "search_cmd"]
