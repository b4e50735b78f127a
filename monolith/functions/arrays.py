"""Array deduplication and sorting."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Literal

from ..responses import SuccessResponse, success_response

_MISSING = object()


def _identity(value: Any) -> tuple[str, Any] | None:
    """Hashable identity for a scalar, or ``None`` for containers.

    Booleans are kept apart from numbers so ``1`` and ``True`` stay distinct.
    """
    if isinstance(value, bool):
        return ("bool", value)
    if isinstance(value, int | float):
        return ("number", value)
    if value is None or isinstance(value, str):
        return (type(value).__name__, value)
    return None


def unique(values: list[Any]) -> SuccessResponse:
    """Drop repeated scalars, keeping first occurrences in order.

    Objects and arrays are compared by identity, so each one is kept.
    """
    seen: set[tuple[str, Any]] = set()
    result = []
    for value in values:
        key = _identity(value)
        if key is not None:
            if key in seen:
                continue
            seen.add(key)
        result.append(value)
    return success_response(result, input_type="array", output_type="array")


def _compare(a: Any, b: Any) -> int:
    # missing keys and values of unrelated types compare equal
    if a is _MISSING or b is _MISSING or a == b:
        return 0
    try:
        if a < b:
            return -1
        if a > b:
            return 1
    except TypeError:
        pass
    return 0


def sort_by(
    records: list[dict[str, Any]],
    key: str,
    direction: Literal["asc", "desc"] = "asc",
) -> SuccessResponse:
    """Stable sort of ``records`` by the value stored under ``key``."""
    sign = 1 if direction == "asc" else -1

    def compare(a: dict[str, Any], b: dict[str, Any]) -> int:
        return sign * _compare(a.get(key, _MISSING), b.get(key, _MISSING))

    result = sorted(records, key=cmp_to_key(compare))
    return success_response(result, input_type="array", output_type="array")
