"""FastMCP tool that forwards calls to the dispatcher.

One ``RoutedTool`` is registered per dispatch operation. Its name,
description and JSON parameter schema come straight from
:meth:`monolith.dispatch.Operation.capability`, and every call goes through
:meth:`monolith.dispatch.Dispatcher.dispatch`. The payload is returned as
pretty-printed JSON text; on the uniform failure path the same text is
raised as a ``ToolError`` so the MCP result carries ``isError: true``.
"""

from __future__ import annotations

from typing import Any

from fastmcp.exceptions import ToolError
from fastmcp.tools.tool import Tool, ToolResult
from mcp.types import TextContent
from pydantic import Field

from monolith.dispatch import Dispatcher, Operation


class RoutedTool(Tool):
    dispatcher: Any = Field(default=None, exclude=True, repr=False)

    @classmethod
    def from_operation(cls, operation: Operation, dispatcher: Dispatcher) -> RoutedTool:
        capability = operation.capability()
        return cls(
            name=capability["name"],
            description=capability["description"],
            parameters=capability["inputSchema"],
            dispatcher=dispatcher,
        )

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        outcome = self.dispatcher.dispatch(self.name, arguments)
        text = outcome.to_text()
        if outcome.is_error:
            raise ToolError(text)
        return ToolResult(content=[TextContent(type="text", text=text)])
