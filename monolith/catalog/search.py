"""Substring search over catalog entries.

The catalog holds tens of entries, so search is a plain linear scan:

* an optional category filter (exact, case-sensitive) is applied first;
* an entry matches when the lower-cased query is a substring of its name,
  description, category or any of its tags.

Results keep catalog order; there is no relevance ranking. An empty query
matches every entry, which is how "list everything in category X" is spelled.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..models import FunctionMetadata


def matches(entry: FunctionMetadata, query: str) -> bool:
    """Return ``True`` if ``query`` occurs in any searchable field of ``entry``."""
    q = query.lower()
    return (
        q in entry.name.lower()
        or q in entry.description.lower()
        or q in entry.category.lower()
        or any(q in tag.lower() for tag in entry.tags)
    )


def search_entries(
    entries: Iterable[FunctionMetadata],
    query: str,
    category: str | None = None,
) -> list[FunctionMetadata]:
    """Filter ``entries`` by ``category`` then by case-insensitive ``query``.

    A ``None`` or empty ``category`` disables the category filter.
    """
    results = []
    for entry in entries:
        if category and entry.category != category:
            continue
        if matches(entry, query):
            results.append(entry)
    return results


__all__ = ["matches", "search_entries"]
