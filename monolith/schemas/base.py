"""Structured argument schemas.

An :class:`ArgumentSchema` is an ordered set of :class:`ParameterSpec` items.
Each spec names the wire parameter (``isoDate``), the Python keyword it binds
to (``iso_date``), a semantic type and the required/default rules. The same
schema object drives three things:

* argument validation (see :mod:`monolith.schemas.validator`);
* the JSON-schema fragment published in the capability listing;
* keyword binding when the implementation is invoked.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator

SemanticType = Literal["string", "number", "integer", "boolean", "array", "record_array"]

_JSON_TYPES: dict[str, dict[str, Any]] = {
    "string": {"type": "string"},
    "number": {"type": "number"},
    "integer": {"type": "integer"},
    "boolean": {"type": "boolean"},
    "array": {"type": "array"},
    "record_array": {"type": "array", "items": {"type": "object"}},
}


class ParameterSpec(BaseModel):
    """Declaration of one operation parameter."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    type: SemanticType
    description: str = ""
    required: bool = True
    default: Any = None
    keyword: str | None = Field(
        default=None, description="Python keyword; defaults to name"
    )
    ge: int | float | None = None
    gt: int | float | None = None
    choices: tuple[str, ...] | None = None

    @model_validator(mode="after")
    def _check_keyword(self):
        if not self.python_name.isidentifier():
            raise ValueError(
                f"Parameter '{self.name}' needs a keyword that is a valid identifier"
            )
        if self.required and self.default is not None:
            raise ValueError(f"Required parameter '{self.name}' cannot have a default")
        return self

    @property
    def python_name(self) -> str:
        return self.keyword or self.name

    def json_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = dict(_JSON_TYPES[self.type])
        if self.description:
            schema["description"] = self.description
        if self.choices:
            schema["enum"] = list(self.choices)
        if self.ge is not None:
            schema["minimum"] = self.ge
        if self.gt is not None:
            schema["exclusiveMinimum"] = self.gt
        if self.default is not None:
            schema["default"] = self.default
        return schema


class ArgumentSchema(BaseModel):
    """Ordered parameter specification for one operation."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    parameters: tuple[ParameterSpec, ...] = ()

    # compiled pydantic model, built on first validation
    _model: type[BaseModel] | None = PrivateAttr(default=None)

    @model_validator(mode="after")
    def _unique_names(self):
        seen: set[str] = set()
        for spec in self.parameters:
            for key in {spec.name, spec.python_name}:
                if key in seen:
                    raise ValueError(f"Duplicate parameter '{key}'")
                seen.add(key)
        return self

    @classmethod
    def of(cls, *parameters: ParameterSpec) -> ArgumentSchema:
        return cls(parameters=parameters)

    @property
    def names(self) -> list[str]:
        return [p.name for p in self.parameters]

    @property
    def required(self) -> list[str]:
        return [p.name for p in self.parameters if p.required]

    def json_schema(self) -> dict[str, Any]:
        """Render as a JSON-schema object for capability listings."""
        schema: dict[str, Any] = {
            "type": "object",
            "properties": {p.name: p.json_schema() for p in self.parameters},
        }
        if self.required:
            schema["required"] = self.required
        return schema


def param(
    name: str,
    type: SemanticType,
    description: str = "",
    *,
    required: bool = True,
    default: Any = None,
    keyword: str | None = None,
    ge: int | float | None = None,
    gt: int | float | None = None,
    choices: tuple[str, ...] | None = None,
) -> ParameterSpec:
    """Shorthand constructor used by the schema definition modules."""
    return ParameterSpec(
        name=name,
        type=type,
        description=description,
        required=required,
        default=default,
        keyword=keyword,
        ge=ge,
        gt=gt,
        choices=choices,
    )


__all__ = ["ArgumentSchema", "ParameterSpec", "SemanticType", "param"]
