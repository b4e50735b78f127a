"""In-memory function catalog.

The catalog is append-only and populated exactly once per process by the
fixed registration sequence in :mod:`monolith.catalog.functions`. After that
sequence it is frozen: entries are immutable models and no further
registration is accepted. Read operations always hand out copies so callers
cannot alter catalog state.
"""

from __future__ import annotations

import logging

from ..exceptions import CatalogFrozenError, DuplicateFunctionError
from ..models import CategoryInfo, FunctionMetadata, category_description
from .search import search_entries

logger = logging.getLogger(__name__)


class FunctionCatalog:
    """Ordered collection of :class:`FunctionMetadata` entries."""

    def __init__(self):
        self._entries: list[FunctionMetadata] = []
        self._frozen = False

    # Registration ------------------------------------------------------------
    def register(self, entry: FunctionMetadata) -> None:
        """Append ``entry``; names must be unique and the catalog unsealed."""
        if self._frozen:
            raise CatalogFrozenError(
                f"Cannot register '{entry.name}': catalog is frozen"
            )
        if self.exists(entry.name):
            raise DuplicateFunctionError(entry.name)
        self._entries.append(entry)

    def freeze(self) -> FunctionCatalog:
        """Seal the catalog against further registration and return it."""
        self._frozen = True
        logger.debug(f"Function catalog frozen with {len(self._entries)} entries")
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    # Queries -----------------------------------------------------------------
    def all(self) -> list[FunctionMetadata]:
        """Return a snapshot of every entry in registration order."""
        return list(self._entries)

    def by_category(self, category: str) -> list[FunctionMetadata]:
        return [e for e in self._entries if e.category == category]

    def by_name(self, name: str) -> FunctionMetadata | None:
        """Return the entry with exactly this (case-sensitive) name, if any."""
        for entry in self._entries:
            if entry.name == name:
                return entry
        return None

    def exists(self, name: str) -> bool:
        return self.by_name(name) is not None

    def names(self) -> list[str]:
        return [e.name for e in self._entries]

    def categories(self) -> list[CategoryInfo]:
        """Aggregate one :class:`CategoryInfo` per distinct category.

        No ordering is promised; callers that present categories sort them.
        """
        counts: dict[str, int] = {}
        for entry in self._entries:
            counts[entry.category] = counts.get(entry.category, 0) + 1
        return [
            CategoryInfo(
                name=name, description=category_description(name), count=count
            )
            for name, count in counts.items()
        ]

    def search(self, query: str, category: str | None = None) -> list[FunctionMetadata]:
        return search_entries(self._entries, query, category)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self.all())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.exists(name)


__all__ = ["FunctionCatalog"]
