from typing import Any

from monolith.decorators.mcp import mcp_tool
from monolith.schemas import discovery
from monolith.tools.base import CatalogTool


class SearchTool(CatalogTool):
    """Keyword search over the function catalog.

    Behavior:
        * Case-insensitive substring match on name, description, category
          and tags; catalog order is preserved.
        * Results are projected to {name, category, description, tags};
          use describe_function for parameters and examples.
        * An empty query with a category lists that whole category.
    """

    @property
    def tool_name(self) -> str:
        return "search_functions"

    @mcp_tool(
        description=(
            "Search for utility functions by keywords. "
            "Returns matching functions with their descriptions."
        ),
        schema=discovery.SEARCH_FUNCTIONS,
    )
    def search_functions(self, query: str, category: str | None = None) -> dict[str, Any]:
        results = self.catalog.search(query, category)
        return {
            "query": query,
            "category": category,
            "count": len(results),
            "functions": [entry.summary() for entry in results],
        }
