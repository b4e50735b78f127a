"""Argument schemas for the utility functions, grouped by category.

Parameter names are the wire names published in the capability listing;
``keyword`` maps camelCase wire names onto the implementation's arguments.
"""

from .base import ArgumentSchema, param

# ---------------------------------------------------------------------------
# strings
# ---------------------------------------------------------------------------
TO_CAMEL_CASE = ArgumentSchema.of(
    param("input", "string", "String to convert to camelCase"),
)

TO_KEBAB_CASE = ArgumentSchema.of(
    param("input", "string", "String to convert to kebab-case"),
)

TRUNCATE = ArgumentSchema.of(
    param("input", "string", "String to truncate"),
    param("length", "integer", "Maximum length", gt=0),
    param(
        "suffix",
        "string",
        "Suffix to append when truncated",
        required=False,
        default="...",
    ),
)

# ---------------------------------------------------------------------------
# validation
# ---------------------------------------------------------------------------
IS_EMAIL = ArgumentSchema.of(param("input", "string", "String to validate as email"))
IS_URL = ArgumentSchema.of(param("input", "string", "String to validate as URL"))
IS_UUID = ArgumentSchema.of(param("input", "string", "String to validate as UUID"))

# ---------------------------------------------------------------------------
# conversion
# ---------------------------------------------------------------------------
JSON_TO_CSV = ArgumentSchema.of(
    param("input", "record_array", "Array of objects to convert to CSV"),
)

CSV_TO_JSON = ArgumentSchema.of(
    param("input", "string", "CSV string to parse into JSON array"),
)

# ---------------------------------------------------------------------------
# dates
# ---------------------------------------------------------------------------
PARSE_DATE = ArgumentSchema.of(
    param("input", "string", "Date string to parse"),
    param(
        "format",
        "string",
        "Optional format pattern for parsing",
        required=False,
        keyword="pattern",
    ),
)

FORMAT_DATE = ArgumentSchema.of(
    param("isoDate", "string", "ISO date string to format", keyword="iso_date"),
    param(
        "format",
        "string",
        "Format pattern (e.g., 'yyyy-MM-dd', 'MMMM d, yyyy')",
        keyword="pattern",
    ),
)

ADD_DAYS = ArgumentSchema.of(
    param("isoDate", "string", "ISO date string", keyword="iso_date"),
    param("days", "integer", "Number of days to add (negative to subtract)"),
)

# ---------------------------------------------------------------------------
# math
# ---------------------------------------------------------------------------
ROUND = ArgumentSchema.of(
    param("value", "number", "Number to round"),
    param("decimals", "integer", "Number of decimal places", ge=0),
)

CLAMP = ArgumentSchema.of(
    param("value", "number", "Number to clamp"),
    param("min", "number", "Minimum value", keyword="minimum"),
    param("max", "number", "Maximum value", keyword="maximum"),
)

# ---------------------------------------------------------------------------
# data
# ---------------------------------------------------------------------------
UNIQUE = ArgumentSchema.of(
    param("array", "array", "Array to get unique values from", keyword="values"),
)

SORT_BY = ArgumentSchema.of(
    param("array", "record_array", "Array of objects to sort", keyword="records"),
    param("key", "string", "Key to sort by"),
    param(
        "direction",
        "string",
        "Sort direction",
        required=False,
        default="asc",
        choices=("asc", "desc"),
    ),
)

# ---------------------------------------------------------------------------
# encoding
# ---------------------------------------------------------------------------
BASE64_ENCODE = ArgumentSchema.of(param("input", "string", "String to encode to base64"))
BASE64_DECODE = ArgumentSchema.of(param("input", "string", "Base64 string to decode"))
