"""Generic argument validator.

One validator serves every operation, discovery and functional alike. Given
an :class:`~monolith.schemas.base.ArgumentSchema` and a raw argument bag it
returns either :class:`ValidArguments` (defaults applied, values coerced to
their semantic type, keys renamed to Python keywords) or
:class:`InvalidArguments` carrying a readable description of what failed.

Validation is delegated to a pydantic model generated from the schema with
``create_model``; the model is compiled once per schema and cached on it.
Unknown keys in the argument bag are ignored.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, create_model

from ..exceptions import ArgumentValidationError
from .base import ArgumentSchema, ParameterSpec

_ANNOTATIONS: dict[str, Any] = {
    "string": str,
    "number": int | float,
    "integer": int,
    "boolean": bool,
    "array": list[Any],
    "record_array": list[dict[str, Any]],
}


@dataclass(frozen=True)
class ValidArguments:
    values: dict[str, Any]

    ok: bool = field(default=True, init=False)

    def unwrap(self) -> dict[str, Any]:
        return self.values


@dataclass(frozen=True)
class InvalidArguments:
    message: str
    errors: list[dict[str, Any]] = field(default_factory=list)

    ok: bool = field(default=False, init=False)

    def unwrap(self) -> dict[str, Any]:
        raise ArgumentValidationError(self.message, self.errors)


ValidationOutcome = ValidArguments | InvalidArguments


def _annotation(spec: ParameterSpec) -> Any:
    annotation = Literal[spec.choices] if spec.choices else _ANNOTATIONS[spec.type]
    if not spec.required and spec.default is None:
        annotation = annotation | None
    return annotation


def _field(spec: ParameterSpec) -> Any:
    return Field(
        default=... if spec.required else spec.default,
        alias=spec.name,
        description=spec.description or None,
        ge=spec.ge,
        gt=spec.gt,
    )


def compile_schema(schema: ArgumentSchema, model_name: str = "Arguments") -> type[BaseModel]:
    """Return the pydantic model validating ``schema`` (cached on the schema)."""
    if schema._model is None:
        fields = {
            spec.python_name: (_annotation(spec), _field(spec))
            for spec in schema.parameters
        }
        schema._model = create_model(
            model_name,
            __config__=ConfigDict(extra="ignore"),
            **fields,
        )
    return schema._model


def format_errors(errors: list[dict[str, Any]]) -> str:
    """Flatten pydantic error dicts into ``"loc: msg; loc: msg"``."""
    parts = []
    for error in errors:
        loc = ".".join(str(p) for p in error.get("loc", ())) or "arguments"
        parts.append(f"{loc}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts)


def validate_arguments(
    schema: ArgumentSchema,
    arguments: Mapping[str, Any] | None,
    operation: str | None = None,
) -> ValidationOutcome:
    """Validate a raw argument bag against ``schema``.

    Args:
        schema: Declared parameters of the operation.
        arguments: Raw argument bag from the caller; ``None`` means empty.
        operation: Operation name, used only to label error messages.

    Returns:
        ValidArguments keyed by Python keyword, or InvalidArguments.
    """
    model = compile_schema(schema)
    try:
        validated = model.model_validate({} if arguments is None else arguments)
    except ValidationError as e:
        errors = e.errors(include_url=False, include_context=False)
        prefix = f"Invalid arguments for {operation}" if operation else "Invalid arguments"
        return InvalidArguments(f"{prefix}: {format_errors(errors)}", errors)
    return ValidArguments(validated.model_dump())


__all__ = [
    "InvalidArguments",
    "ValidArguments",
    "ValidationOutcome",
    "compile_schema",
    "format_errors",
    "validate_arguments",
]
