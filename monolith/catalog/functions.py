"""Fixed registration sequence for the utility function catalog.

Catalog metadata lives in the packaged ``resources/functions.yml`` file and is
registered in file order. :func:`build_catalog` is the single construction
point used by the server, the CLI and the tests; it returns a frozen catalog
that is passed explicitly to the discovery tools and the dispatcher.
"""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path

import yaml

from ..models import FunctionMetadata
from .store import FunctionCatalog

logger = logging.getLogger(__name__)


def _default_source() -> Path:
    return Path(str(resources.files("monolith") / "resources" / "functions.yml"))


def load_function_metadata(path: str | Path | None = None) -> list[FunctionMetadata]:
    """Load and validate catalog entries from a YAML file.

    Args:
        path: Optional YAML file; defaults to the packaged catalog.

    Returns:
        Entries in file order.
    """
    source = Path(path) if path is not None else _default_source()
    with open(source, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return [FunctionMetadata.model_validate(item) for item in data.get("functions", [])]


def register_all_functions(
    catalog: FunctionCatalog, path: str | Path | None = None
) -> FunctionCatalog:
    """Register every catalog entry in declaration order."""
    for entry in load_function_metadata(path):
        catalog.register(entry)
    return catalog


def build_catalog(path: str | Path | None = None) -> FunctionCatalog:
    """Create, populate and freeze a new function catalog."""
    catalog = register_all_functions(FunctionCatalog(), path)
    logger.debug(f"Registered {len(catalog)} utility functions")
    return catalog.freeze()


__all__ = ["build_catalog", "load_function_metadata", "register_all_functions"]
