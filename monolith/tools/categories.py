from typing import Any

from monolith.decorators.mcp import mcp_tool
from monolith.schemas import discovery
from monolith.tools.base import CatalogTool


def category_sort_key(name: str) -> tuple[str, str]:
    """Case-insensitive ordering with a case-sensitive tie break."""
    return (name.casefold(), name)


class CategoriesTool(CatalogTool):
    """Tool listing the catalog categories with their function counts."""

    @property
    def tool_name(self) -> str:
        return "list_categories"

    @mcp_tool(
        description="List all available function categories with their counts.",
        schema=discovery.LIST_CATEGORIES,
    )
    def list_categories(self) -> dict[str, Any]:
        categories = sorted(
            self.catalog.categories(), key=lambda c: category_sort_key(c.name)
        )
        return {
            "count": len(categories),
            "categories": [c.model_dump() for c in categories],
        }
