"""Response envelope shared by every functional operation.

Every utility implementation returns exactly one of:

* :class:`SuccessResponse` ``{success: true, result, metadata?}``
* :class:`ErrorResponse` ``{success: false, error, errorCode, details?}``

Error codes are operation specific (``INVALID_DATE``, ``INVALID_RANGE`` ...).
The dispatcher never interprets them; it only serialises the envelope. An
envelope-level failure is still a transport-level success.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from pydantic_core import to_jsonable_python


class _Envelope(BaseModel):
    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )


class ResponseMetadata(_Envelope):
    """Informational metadata; never consumed by the dispatcher."""

    input_type: str | None = None
    output_type: str | None = None
    execution_time: float | None = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class SuccessResponse(_Envelope):
    success: Literal[True] = True
    result: Any
    metadata: ResponseMetadata | None = None

    def to_payload(self) -> dict[str, Any]:
        """Serialise with camelCase keys; ``metadata`` only when present."""
        payload: dict[str, Any] = {
            "success": True,
            "result": to_jsonable_python(self.result),
        }
        if self.metadata is not None:
            payload["metadata"] = self.metadata.to_payload()
        return payload


class ErrorResponse(_Envelope):
    success: Literal[False] = False
    error: str
    error_code: str
    details: Any = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "success": False,
            "error": self.error,
            "errorCode": self.error_code,
        }
        if self.details is not None:
            payload["details"] = to_jsonable_python(self.details)
        return payload


UtilityResponse = SuccessResponse | ErrorResponse


def success_response(
    result: Any,
    input_type: str | None = None,
    output_type: str | None = None,
    execution_time: float | None = None,
) -> SuccessResponse:
    """Build a success envelope; metadata is attached only when given."""
    metadata = None
    if input_type or output_type or execution_time is not None:
        metadata = ResponseMetadata(
            input_type=input_type,
            output_type=output_type,
            execution_time=execution_time,
        )
    return SuccessResponse(result=result, metadata=metadata)


def error_response(error: str, error_code: str, details: Any = None) -> ErrorResponse:
    return ErrorResponse(error=error, error_code=error_code, details=details)


__all__ = [
    "ErrorResponse",
    "ResponseMetadata",
    "SuccessResponse",
    "UtilityResponse",
    "error_response",
    "success_response",
]
