"""
Monolith MCP Server.

Exposes the utility-function catalog over the Model Context Protocol. The
server publishes one tool per dispatch operation: the three discovery tools
(search_functions, list_categories, describe_function) followed by every
catalog function under its path-style name (e.g. ``strings/toCamelCase``).

All requests are routed through :class:`monolith.dispatch.Dispatcher`, which
is reachable via ``server.tools.dispatcher``.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

import nest_asyncio
from fastmcp import FastMCP

from .tools import Tools

# apply nest_asyncio to allow nested event loops
# This is necessary for Jupyter notebooks and some other environments
# that don't support nested event loops by default.
nest_asyncio.apply()

# Default to WARNING but allow CLI to override this
logging.basicConfig(
    level=logging.WARNING, format="%(name)s - %(levelname)s - %(message)s"
)

# Keep stdio quiet so INFO messages do not surface as warnings in MCP clients
logger = logging.getLogger(__name__)
logger.setLevel(logging.WARNING)

# General FastMCP logger
fastmcp_logger = logging.getLogger("FastMCP")
fastmcp_logger.setLevel(logging.WARNING)


@dataclass
class Server:
    """Monolith MCP server composed from the tools provider."""

    catalog_path: str | Path | None = None

    # Internal fields
    mcp: FastMCP = field(init=False, repr=False)
    tools: Tools = field(init=False, repr=False)

    def __post_init__(self):
        """Initialize the MCP server after dataclass initialization."""
        self.mcp = FastMCP(name="monolith")

        self.tools = Tools(catalog_path=self.catalog_path)

        self._register_components()

        logger.debug(
            f"Monolith MCP server initialized with {len(self.tools.dispatcher)} tools"
        )

    def _register_components(self):
        """Register tools with the MCP server."""
        logger.debug("Registering tools component")
        self.tools.register(self.mcp)

        logger.debug("Successfully registered all components")

    def run(
        self,
        transport: Literal["stdio", "sse", "streamable-http"] = "stdio",
        host: str = "127.0.0.1",
        port: int = 8000,
    ):
        """Run the server with the specified transport.

        Args:
            transport: Transport protocol to use
            host: Host to bind to (for HTTP transports)
            port: Port to bind to (for HTTP transports)
        """
        # stdio: suppress INFO logs; HTTP transports: allow INFO logs
        if transport == "stdio":
            logger.setLevel(logging.WARNING)
            logger.debug("Starting Monolith MCP server with stdio transport")
            self.mcp.run(transport=transport)
        elif transport in ["sse", "streamable-http"]:
            logger.setLevel(logging.INFO)
            logger.info(
                f"Starting Monolith MCP server with {transport} transport on {host}:{port}"
            )
            self.mcp.run(transport=transport, host=host, port=port)
        else:
            raise ValueError(
                f"Unsupported transport: {transport}. "
                f"Supported transports: stdio, sse, streamable-http"
            )
