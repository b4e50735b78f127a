"""Decorator marking tool methods for MCP registration.

``mcp_tool`` records the tool name, description and argument schema on the
decorated method. :func:`monolith.dispatch.discovery_operations` finds marked
methods by introspection and turns each into a dispatch operation, so
registration stays declarative.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from ..schemas import ArgumentSchema

F = TypeVar("F", bound=Callable[..., Any])


def mcp_tool(
    description: str, schema: ArgumentSchema, name: str | None = None
) -> Callable[[F], F]:
    """Mark a method as an MCP tool.

    Args:
        description: Human readable description published to clients.
        schema: Argument schema validated before the method is called.
        name: Tool name; defaults to the method name.
    """

    def decorator(func: F) -> F:
        func._mcp_tool = True  # type: ignore[attr-defined]
        func._mcp_name = name or func.__name__  # type: ignore[attr-defined]
        func._mcp_description = description  # type: ignore[attr-defined]
        func._mcp_schema = schema  # type: ignore[attr-defined]
        return func

    return decorator


__all__ = ["mcp_tool"]
