"""Exception types raised by the catalog and the dispatch pipeline.

Startup failures (duplicate or mismatched registrations) propagate and stop
the process. Pipeline failures (unknown tool, invalid arguments) are raised
inside :meth:`monolith.dispatch.Dispatcher.dispatch` and converted there into
the uniform ``TOOL_EXECUTION_ERROR`` payload.
"""

from __future__ import annotations


class MonolithError(Exception):
    """Base class for all errors raised by this package."""


class DuplicateFunctionError(MonolithError):
    """A function name was registered twice."""

    def __init__(self, name: str):
        super().__init__(f"Function '{name}' is already registered")
        self.name = name


class CatalogFrozenError(MonolithError):
    """Registration attempted after the catalog was sealed."""


class RegistryMismatchError(MonolithError):
    """Catalog entries and dispatch bindings disagree."""


class UnknownToolError(MonolithError):
    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class ArgumentValidationError(MonolithError):
    """Raised when an argument bag does not satisfy its schema."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        super().__init__(message)
        self.errors = errors or []


__all__ = [
    "ArgumentValidationError",
    "CatalogFrozenError",
    "DuplicateFunctionError",
    "MonolithError",
    "RegistryMismatchError",
    "UnknownToolError",
]
