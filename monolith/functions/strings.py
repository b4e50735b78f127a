"""String case conversion and manipulation."""

from __future__ import annotations

import re

from ..responses import SuccessResponse, success_response

_NON_ALNUM_THEN_CHAR = re.compile(r"[^a-zA-Z0-9]+(.)")
_LOWER_UPPER = re.compile(r"([a-z])([A-Z])")
_SPACE_OR_UNDERSCORE = re.compile(r"[\s_]+")
_NOT_KEBAB = re.compile(r"[^a-z0-9-]")
_LEADING_CAPITAL = re.compile(r"^[A-Z]")


def to_camel_case(input: str) -> SuccessResponse:
    """Convert ``input`` to camelCase.

    The string is lower-cased, every run of non-alphanumeric characters is
    dropped and the character following it upper-cased, then a leading capital
    is lowered: ``"hello-world"`` -> ``"helloWorld"``.
    """
    result = _NON_ALNUM_THEN_CHAR.sub(lambda m: m.group(1).upper(), input.lower())
    result = _LEADING_CAPITAL.sub(lambda m: m.group(0).lower(), result)
    return success_response(result, input_type="string", output_type="string")


def to_kebab_case(input: str) -> SuccessResponse:
    """Convert ``input`` to kebab-case: ``"helloWorld"`` -> ``"hello-world"``."""
    result = _LOWER_UPPER.sub(r"\1-\2", input)
    result = _SPACE_OR_UNDERSCORE.sub("-", result).lower()
    result = _NOT_KEBAB.sub("", result)
    return success_response(result, input_type="string", output_type="string")


def truncate(input: str, length: int, suffix: str = "...") -> SuccessResponse:
    """Shorten ``input`` to ``length`` characters including ``suffix``.

    Strings already within the limit are returned unchanged.
    """
    if len(input) <= length:
        return success_response(input, input_type="string", output_type="string")
    result = input[: length - len(suffix)] + suffix
    return success_response(result, input_type="string", output_type="string")
