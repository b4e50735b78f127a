"""Base64 encoding of UTF-8 text."""

from __future__ import annotations

import base64
import binascii

from ..responses import UtilityResponse, error_response, success_response


def base64_encode(input: str) -> UtilityResponse:
    result = base64.b64encode(input.encode("utf-8")).decode("ascii")
    return success_response(result, input_type="string", output_type="string")


def base64_decode(input: str) -> UtilityResponse:
    """Decode base64 text to UTF-8; undecodable bytes become U+FFFD."""
    compact = "".join(input.split())
    # tolerate missing padding
    compact += "=" * (-len(compact) % 4)
    try:
        raw = base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as e:
        return error_response(f"Invalid base64 string: {e}", "DECODING_ERROR")
    result = raw.decode("utf-8", errors="replace")
    return success_response(result, input_type="string", output_type="string")
