"""Argument schemas and the generic validator shared by all operations."""

from .base import ArgumentSchema, ParameterSpec, param
from .validator import (
    InvalidArguments,
    ValidArguments,
    ValidationOutcome,
    validate_arguments,
)

__all__ = [
    "ArgumentSchema",
    "InvalidArguments",
    "ParameterSpec",
    "ValidArguments",
    "ValidationOutcome",
    "param",
    "validate_arguments",
]
