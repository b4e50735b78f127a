import logging
from pathlib import Path

from fastmcp import FastMCP

from monolith.catalog import FunctionCatalog, build_catalog
from monolith.dispatch import Dispatcher
from monolith.tools.categories import CategoriesTool
from monolith.tools.describe import DescribeTool
from monolith.tools.routed import RoutedTool
from monolith.tools.search import SearchTool

logger = logging.getLogger(__name__)


class Tools:
    """Main Tools class wiring the catalog, discovery tools and dispatcher."""

    def __init__(
        self,
        catalog: FunctionCatalog | None = None,
        catalog_path: str | Path | None = None,
    ):
        """Initialize the tools provider.

        Args:
            catalog: Pre-built catalog; when None one is built at startup.
            catalog_path: Optional YAML catalog file used when building.
                          If None, uses the packaged function catalog.
        """
        self.catalog = catalog if catalog is not None else build_catalog(catalog_path)

        # Discovery tools (read-only views of the catalog)
        self.search_tool = SearchTool(self.catalog)
        self.categories_tool = CategoriesTool(self.catalog)
        self.describe_tool = DescribeTool(self.catalog)

        self.discovery_tools = [self.search_tool, self.categories_tool, self.describe_tool]
        logger.debug(
            f"Discovery tools: {', '.join(t.tool_name for t in self.discovery_tools)}"
        )

        # Single dispatch table for discovery and functional operations
        self.dispatcher = Dispatcher.build(self.catalog, self.discovery_tools)

    def register(self, mcp: FastMCP):
        """Register every dispatch operation as an MCP tool.

        Tool names, descriptions and parameter schemas are taken from the
        dispatcher's capability listing, so the published tools and the
        dispatchable operations are the same set.
        """
        for operation in self.dispatcher.operations():
            mcp.add_tool(RoutedTool.from_operation(operation, self.dispatcher))
        logger.debug(f"Registered {len(self.dispatcher)} tools")
