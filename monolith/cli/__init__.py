"""CLI command group for Monolith.

This module exposes the root Click command group `monolith` which aggregates
subcommands implemented in sibling modules.

Example usage:

        monolith search case
        monolith call strings/toCamelCase --args '{"input": "hello world"}'
        monolith serve --transport streamable-http
"""

from __future__ import annotations

import click

from .query import call_cmd, categories_cmd, describe_cmd, search_cmd
from .server import main as serve_cmd


@click.group()
def monolith():  # pragma: no cover - thin group wrapper
    """Monolith utility function commands."""


# Register subcommands
monolith.add_command(search_cmd)
monolith.add_command(categories_cmd)
monolith.add_command(describe_cmd)
monolith.add_command(call_cmd)
monolith.add_command(serve_cmd)

__all__ = ["monolith"]
