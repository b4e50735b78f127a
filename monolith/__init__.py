"""Monolith: MCP server exposing a searchable catalog of utility functions."""

import importlib.metadata

# Distribution metadata is absent for in-tree runs (e.g. tests before install)
try:  # pragma: no cover - trivial guard
    __version__ = importlib.metadata.version("monolith-mcp")
except (importlib.metadata.PackageNotFoundError, KeyError):
    __version__ = "0.0.0"

__all__ = ["__version__"]
