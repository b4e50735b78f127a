"""Argument schemas for the discovery tools."""

from .base import ArgumentSchema, param

SEARCH_FUNCTIONS = ArgumentSchema.of(
    param("query", "string", "Search query (keywords or description)"),
    param("category", "string", "Optional category filter", required=False),
)

LIST_CATEGORIES = ArgumentSchema.of()

DESCRIBE_FUNCTION = ArgumentSchema.of(
    param("name", "string", "Full function name (e.g., 'strings/toCamelCase')"),
)
