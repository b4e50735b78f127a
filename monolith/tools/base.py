"""Base tool functionality for the discovery tools."""

from abc import ABC, abstractmethod

from monolith.catalog import FunctionCatalog


class Tool(ABC):
    """Minimal base class for all MCP tools."""

    @property
    @abstractmethod
    def tool_name(self) -> str:
        """Return the name of this tool - must be implemented by subclasses."""


class CatalogTool(Tool):
    """Base class for tools that read the function catalog."""

    def __init__(self, catalog: FunctionCatalog | None = None):
        if catalog is None:
            raise ValueError("CatalogTool requires a catalog instance - received None")
        self.catalog = catalog
