"""Utility implementations and their dispatch bindings.

Each binding pairs a catalog name with the argument schema used to validate
calls and the implementation invoked with the validated keyword arguments.
Every catalog entry must have exactly one binding here; the dispatcher
verifies this at startup.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..responses import UtilityResponse
from ..schemas import ArgumentSchema
from ..schemas import functions as schemas
from . import arithmetic, arrays, conversion, dates, encoding, strings, validation


@dataclass(frozen=True)
class FunctionBinding:
    name: str
    schema: ArgumentSchema
    implementation: Callable[..., UtilityResponse]


FUNCTION_BINDINGS: tuple[FunctionBinding, ...] = (
    # strings
    FunctionBinding("strings/toCamelCase", schemas.TO_CAMEL_CASE, strings.to_camel_case),
    FunctionBinding("strings/toKebabCase", schemas.TO_KEBAB_CASE, strings.to_kebab_case),
    FunctionBinding("strings/truncate", schemas.TRUNCATE, strings.truncate),
    # validation
    FunctionBinding("validation/isEmail", schemas.IS_EMAIL, validation.is_email),
    FunctionBinding("validation/isUrl", schemas.IS_URL, validation.is_url),
    FunctionBinding("validation/isUuid", schemas.IS_UUID, validation.is_uuid),
    # conversion
    FunctionBinding("conversion/jsonToCsv", schemas.JSON_TO_CSV, conversion.json_to_csv),
    FunctionBinding("conversion/csvToJson", schemas.CSV_TO_JSON, conversion.csv_to_json),
    # dates
    FunctionBinding("dates/parseDate", schemas.PARSE_DATE, dates.parse_date),
    FunctionBinding("dates/formatDate", schemas.FORMAT_DATE, dates.format_date),
    FunctionBinding("dates/addDays", schemas.ADD_DAYS, dates.add_days),
    # math
    FunctionBinding("math/round", schemas.ROUND, arithmetic.round_number),
    FunctionBinding("math/clamp", schemas.CLAMP, arithmetic.clamp),
    # data
    FunctionBinding("data/arrays/unique", schemas.UNIQUE, arrays.unique),
    FunctionBinding("data/arrays/sortBy", schemas.SORT_BY, arrays.sort_by),
    # encoding
    FunctionBinding("encoding/base64Encode", schemas.BASE64_ENCODE, encoding.base64_encode),
    FunctionBinding("encoding/base64Decode", schemas.BASE64_DECODE, encoding.base64_decode),
)

__all__ = ["FUNCTION_BINDINGS", "FunctionBinding"]
