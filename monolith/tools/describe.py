"""
Describe tool returning the complete catalog entry for one function.

The entry includes parameters, return description, examples, tags and the
performance hint. An unknown name is reported in the payload with
``errorCode: FUNCTION_NOT_FOUND``; it is not a tool failure.
"""

from __future__ import annotations

from typing import Any

from monolith.decorators.mcp import mcp_tool
from monolith.schemas import discovery
from monolith.tools.base import CatalogTool


class DescribeTool(CatalogTool):
    """Tool for full function metadata retrieval."""

    @property
    def tool_name(self) -> str:
        return "describe_function"

    @mcp_tool(
        description=(
            "Get detailed information about a specific function including "
            "parameters, examples, and usage."
        ),
        schema=discovery.DESCRIBE_FUNCTION,
    )
    def describe_function(self, name: str) -> dict[str, Any]:
        """Return the catalog entry for ``name``.

        Args:
            name: Full function name, e.g. ``strings/toCamelCase``.

        Returns:
            The entry as a dict, or an error payload when not found.
        """
        entry = self.catalog.by_name(name)
        if entry is None:
            return {
                "error": f"Function '{name}' not found",
                "errorCode": "FUNCTION_NOT_FOUND",
            }
        return entry.to_payload()
