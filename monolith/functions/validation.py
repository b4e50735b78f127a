"""Format validators: email, URL and UUID.

A malformed input is not an error; each check returns a success envelope
whose result is ``True`` or ``False``.
"""

from __future__ import annotations

import re

from pydantic import AnyUrl, EmailStr, TypeAdapter, ValidationError

from ..responses import SuccessResponse, success_response

_EMAIL = TypeAdapter(EmailStr)
_URL = TypeAdapter(AnyUrl)

URL_SCHEMES = frozenset({"http", "https", "ftp"})
UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE
)


def _check(value: bool) -> SuccessResponse:
    return success_response(value, input_type="string", output_type="boolean")


def is_email(input: str) -> SuccessResponse:
    """Validate email syntax (no deliverability lookup)."""
    try:
        _EMAIL.validate_python(input)
    except ValidationError:
        return _check(False)
    return _check(True)


def _valid_url(value: str) -> bool:
    if not value or any(ch.isspace() for ch in value):
        return False
    candidate = value if "://" in value else f"http://{value}"
    try:
        url = _URL.validate_python(candidate)
    except ValidationError:
        return False
    host = url.host or ""
    # require a top-level domain, as for public web addresses
    return url.scheme in URL_SCHEMES and "." in host.strip(".")


def is_url(input: str) -> SuccessResponse:
    """Validate an http, https or ftp URL; the scheme may be omitted."""
    return _check(_valid_url(input))


def is_uuid(input: str) -> SuccessResponse:
    """Validate the canonical hyphenated UUID form (any version)."""
    return _check(UUID_PATTERN.match(input) is not None)
