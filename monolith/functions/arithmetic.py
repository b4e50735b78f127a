"""Numeric rounding and clamping."""

from __future__ import annotations

import math

from ..responses import UtilityResponse, error_response, success_response

Number = int | float


def round_number(value: Number, decimals: int) -> UtilityResponse:
    """Round half up (towards positive infinity) to ``decimals`` places.

    ``round(2.5, 0)`` gives 3 and ``round(-2.5, 0)`` gives -2, unlike the
    banker's rounding of the builtin.
    """
    multiplier = 10**decimals
    try:
        result = math.floor(value * multiplier + 0.5) / multiplier
    except (OverflowError, ValueError) as e:
        return error_response(f"Cannot round {value!r}: {e}", "MATH_ERROR")
    if decimals == 0:
        result = int(result)
    return success_response(result, input_type="number", output_type="number")


def clamp(value: Number, minimum: Number, maximum: Number) -> UtilityResponse:
    if minimum > maximum:
        return error_response(
            "Min value cannot be greater than max value", "INVALID_RANGE"
        )
    result = min(max(value, minimum), maximum)
    return success_response(result, input_type="number", output_type="number")
