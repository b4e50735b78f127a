"""Pydantic models for the utility function catalog.

A catalog entry carries everything needed to discover and document one
callable operation:

  name: strings/truncate
  category: strings
  subcategory: manipulation
  description: Truncate string to specified length with optional suffix
  parameters:
    - {name: input, type: string, description: String to truncate, required: true}
    - {name: length, type: number, description: Maximum length, required: true}
    - {name: suffix, type: string, description: Suffix to append, required: false, default: "..."}
  returns: truncated string
  examples:
    - description: Truncate long string
      input: {input: Hello World, length: 8}
      output: Hello...
  tags: [string, truncate, shorten, ellipsis]
  performance: "< 1ms"

Entries are frozen once constructed; ``parameters``, ``examples`` and ``tags``
are stored as tuples, and example values and parameter defaults are deep-frozen
(mappings become read-only proxies, lists become tuples), so the catalog
cannot be mutated through an entry. Serialisation thaws them back to plain
JSON containers.
Category information is never stored; :class:`CategoryInfo` is aggregated on
demand by the catalog store.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

FUNCTION_NAME_PATTERN = r"^[a-z][a-z0-9]*(/[A-Za-z][A-Za-z0-9]*)+$"

FunctionName = Annotated[
    str,
    Field(
        description="Namespaced function name <category>/<operation>",
        pattern=FUNCTION_NAME_PATTERN,
        examples=["strings/toCamelCase", "data/arrays/unique"],
    ),
]


def freeze(value: Any) -> Any:
    """Return a read-only deep copy: mappings -> proxies, lists -> tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: freeze(v) for k, v in value.items()})
    if isinstance(value, list | tuple):
        return tuple(freeze(v) for v in value)
    return value


def thaw(value: Any) -> Any:
    """Inverse of :func:`freeze`, giving plain dicts and lists."""
    if isinstance(value, Mapping):
        return {k: thaw(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [thaw(v) for v in value]
    return value


class ParameterInfo(BaseModel):
    """Documentation of a single function parameter."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    type: str
    description: str
    required: bool
    default: Any = None

    @field_validator("default")
    @classmethod
    def _freeze_default(cls, v: Any) -> Any:
        return freeze(v)

    @field_serializer("default")
    def _thaw_default(self, v: Any) -> Any:
        return thaw(v)


class Example(BaseModel):
    """Usage example: sample input bag and the expected result value."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    description: str
    input: Mapping[str, Any]
    output: Any = None

    @field_validator("input", "output")
    @classmethod
    def _freeze(cls, v: Any) -> Any:
        return freeze(v)

    @field_serializer("input", "output")
    def _thaw(self, v: Any) -> Any:
        return thaw(v)

    def arguments(self) -> dict[str, Any]:
        """Mutable copy of ``input``, ready to pass to the dispatcher."""
        return thaw(self.input)

    def expected(self) -> Any:
        return thaw(self.output)


class FunctionMetadata(BaseModel):
    """Catalog entry describing one callable utility function."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: FunctionName
    category: str
    subcategory: str | None = None
    description: str
    parameters: tuple[ParameterInfo, ...] = ()
    returns: str
    examples: tuple[Example, ...] = ()
    tags: tuple[str, ...] = ()
    performance: str | None = None

    @field_validator("category")
    @classmethod
    def _category_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("category must not be blank")
        return v

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-ready form, omitting optional fields that are unset."""
        return self.model_dump(mode="json", exclude_none=True)

    def summary(self) -> dict[str, Any]:
        """Compact projection used by search results."""
        return {
            "name": self.name,
            "category": self.category,
            "description": self.description,
            "tags": list(self.tags),
        }


class CategoryInfo(BaseModel):
    """Aggregated view of one category (derived, never persisted)."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    count: int


def category_description(category: str) -> str:
    return f"{category[:1].upper()}{category[1:]} utility functions"


__all__ = [
    "CategoryInfo",
    "Example",
    "FUNCTION_NAME_PATTERN",
    "FunctionMetadata",
    "FunctionName",
    "ParameterInfo",
    "category_description",
    "freeze",
    "thaw",
]
