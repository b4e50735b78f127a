"""CLI interface for the Monolith MCP server."""

import logging
from typing import Literal, cast

import click

from monolith import __version__
from monolith.server import Server

# Configure logging
logger = logging.getLogger(__name__)


def _print_version(
    ctx: click.Context, param: click.Parameter, value: bool
) -> None:  # pragma: no cover - simple utility
    """Callback to print only the raw version and exit early."""
    if not value or ctx.resilient_parsing:
        return
    click.echo(__version__)
    ctx.exit()


def configure_logging(log_level: str) -> None:
    """Force the root logger and its handlers to ``log_level``."""
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level))
    for handler in root_logger.handlers:
        handler.setLevel(getattr(logging, log_level))
    logger.debug(f"Set logging level to {log_level}")


@click.command("serve")
@click.option(
    "--version",
    is_flag=True,
    callback=_print_version,
    expose_value=False,
    is_eager=True,
    help="Show the monolith-mcp version and exit (raw version only).",
)
@click.option(
    "--transport",
    envvar="TRANSPORT",
    default="stdio",
    type=click.Choice(["stdio", "sse", "streamable-http"]),
    help="Transport protocol (env: TRANSPORT) (stdio, sse, or streamable-http)",
)
@click.option(
    "--host",
    envvar="HOST",
    default="127.0.0.1",
    help="Host to bind (env: HOST) for sse and streamable-http transports",
)
@click.option(
    "--port",
    envvar="PORT",
    default=8000,
    type=int,
    help="Port to bind (env: PORT) for sse and streamable-http transports",
)
@click.option(
    "--catalog",
    "catalog_path",
    envvar="MONOLITH_CATALOG",
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=str),
    help="Alternative function catalog YAML file (env: MONOLITH_CATALOG)",
)
@click.option(
    "--log-level",
    envvar="LOG_LEVEL",
    default="INFO",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Set the logging level (env: LOG_LEVEL)",
)
def main(
    transport: str,
    host: str,
    port: int,
    catalog_path: str | None,
    log_level: str,
) -> None:
    """Run the Monolith MCP server with configurable transport options.

    Examples:
        # Run with default STDIO transport
        monolith-mcp

        # Run with HTTP transport on custom host/port
        monolith-mcp --transport streamable-http --host 0.0.0.0 --port 9000

        # Run with debug logging
        monolith-mcp --log-level DEBUG
    """
    configure_logging(log_level)
    logger.debug(f"Starting MCP server with transport={transport}")

    match transport:
        case "stdio":
            logger.debug("Using STDIO transport")
        case _:
            logger.info(f"Using {transport} transport on {host}:{port}")

    server = Server(catalog_path=catalog_path)
    server.run(
        transport=cast(Literal["stdio", "sse", "streamable-http"], transport),
        host=host,
        port=port,
    )


if __name__ == "__main__":
    main()
