"""Function catalog: store, search and the startup registration sequence."""

from .functions import build_catalog, load_function_metadata, register_all_functions
from .search import search_entries
from .store import FunctionCatalog

__all__ = [
    "FunctionCatalog",
    "build_catalog",
    "load_function_metadata",
    "register_all_functions",
    "search_entries",
]
