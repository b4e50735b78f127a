"""Date parsing, formatting and arithmetic.

Dates are exchanged as ISO 8601 strings. Results are always rendered in UTC
with millisecond precision and a ``Z`` suffix (``2025-12-11T00:00:00.000Z``);
inputs without an offset are taken to be UTC.

Patterns use the Unicode/date-fns token style (``yyyy-MM-dd``,
``MMMM d, yyyy``, ``HH:mm:ss``). Text in single quotes is literal and ``''``
is an escaped quote. Supported tokens:

=========  ======================================
``yyyy``   4-digit year (``y`` unpadded, ``yy`` 2-digit)
``MMMM``   month name (``MMM`` abbreviated, ``MM``/``M`` number)
``dd``     day of month (``d`` unpadded)
``EEEE``   weekday name (``EEE``/``E`` abbreviated)
``HH``     hour 0-23 (``H`` unpadded); ``hh``/``h`` for 1-12
``mm``     minutes (``m`` unpadded)
``ss``     seconds (``s`` unpadded)
``SSS``    milliseconds
``a``      AM/PM
``XXX``    UTC offset ``Z`` or ``+hh:mm`` (``XX`` ``+hhmm``, ``X`` ``+hh``)
=========  ======================================

Any other unquoted ASCII letter is rejected so typos fail loudly.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from datetime import UTC, datetime, timedelta
from email.utils import parsedate_to_datetime

from ..responses import UtilityResponse, error_response, success_response

MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
WEEKDAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

# Fallback formats for free-form date strings that are not ISO 8601
FALLBACK_FORMATS = (
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d, %Y %H:%M:%S",
    "%d %B %Y",
    "%d %b %Y",
    "%m/%d/%Y",
    "%Y/%m/%d",
    "%m/%d/%Y %H:%M:%S",
)


class DatePatternError(ValueError):
    """Pattern contains an unsupported or unescaped token."""


def _offset(dt: datetime, sep: str, minutes: bool = True) -> str:
    delta = dt.utcoffset() or timedelta(0)
    if not delta:
        return "Z"
    total = int(delta.total_seconds() // 60)
    sign = "+" if total >= 0 else "-"
    hours, mins = divmod(abs(total), 60)
    return f"{sign}{hours:02d}{sep}{mins:02d}" if minutes else f"{sign}{hours:02d}"


_FORMATTERS: dict[str, Callable[[datetime], str]] = {
    "yyyy": lambda d: f"{d.year:04d}",
    "yy": lambda d: f"{d.year % 100:02d}",
    "y": lambda d: str(d.year),
    "MMMM": lambda d: MONTHS[d.month - 1],
    "MMM": lambda d: MONTHS[d.month - 1][:3],
    "MM": lambda d: f"{d.month:02d}",
    "M": lambda d: str(d.month),
    "dd": lambda d: f"{d.day:02d}",
    "d": lambda d: str(d.day),
    "EEEE": lambda d: WEEKDAYS[d.weekday()],
    "EEE": lambda d: WEEKDAYS[d.weekday()][:3],
    "E": lambda d: WEEKDAYS[d.weekday()][:3],
    "HH": lambda d: f"{d.hour:02d}",
    "H": lambda d: str(d.hour),
    "hh": lambda d: f"{d.hour % 12 or 12:02d}",
    "h": lambda d: str(d.hour % 12 or 12),
    "mm": lambda d: f"{d.minute:02d}",
    "m": lambda d: str(d.minute),
    "ss": lambda d: f"{d.second:02d}",
    "s": lambda d: str(d.second),
    "SSS": lambda d: f"{d.microsecond // 1000:03d}",
    "a": lambda d: "AM" if d.hour < 12 else "PM",
    "XXX": lambda d: _offset(d, ":"),
    "XX": lambda d: _offset(d, ""),
    "X": lambda d: _offset(d, "", minutes=False),
}

_DIRECTIVES: dict[str, str] = {
    "yyyy": "%Y",
    "yy": "%y",
    "y": "%Y",
    "MMMM": "%B",
    "MMM": "%b",
    "MM": "%m",
    "M": "%m",
    "dd": "%d",
    "d": "%d",
    "EEEE": "%A",
    "EEE": "%a",
    "E": "%a",
    "HH": "%H",
    "H": "%H",
    "hh": "%I",
    "h": "%I",
    "mm": "%M",
    "m": "%M",
    "ss": "%S",
    "s": "%S",
    "SSS": "%f",
    "a": "%p",
    "XXX": "%z",
    "XX": "%z",
    "X": "%z",
}

_TOKEN = re.compile(r"'(?:[^']|'')*'|''|([A-Za-z])\1*|.", re.DOTALL)


def tokenize(pattern: str) -> Iterator[tuple[bool, str]]:
    """Yield ``(is_field, text)`` pairs for a date pattern.

    Raises:
        DatePatternError: On letter runs that are not supported tokens.
    """
    for match in _TOKEN.finditer(pattern):
        text = match.group(0)
        if text == "''":
            yield False, "'"
        elif text.startswith("'") and len(text) > 1 and text.endswith("'"):
            yield False, text[1:-1].replace("''", "'")
        elif match.group(1):
            if text not in _FORMATTERS:
                raise DatePatternError(
                    f"Format string contains an unsupported token '{text}'"
                )
            yield True, text
        else:
            yield False, text


def format_with_pattern(dt: datetime, pattern: str) -> str:
    return "".join(
        _FORMATTERS[text](dt) if is_field else text
        for is_field, text in tokenize(pattern)
    )


def pattern_to_strptime(pattern: str) -> str:
    return "".join(
        _DIRECTIVES[text] if is_field else text.replace("%", "%%")
        for is_field, text in tokenize(pattern)
    )


def to_iso(dt: datetime) -> str:
    """Render as UTC ISO 8601 with milliseconds, e.g. ``2025-12-11T00:00:00.000Z``."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    dt = dt.astimezone(UTC)
    return (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
        f"T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
        f".{dt.microsecond // 1000:03d}Z"
    )


def _as_utc(dt: datetime) -> datetime:
    return dt.replace(tzinfo=UTC) if dt.tzinfo is None else dt


def parse_iso(value: str) -> datetime:
    """Parse an ISO 8601 string; naive values are taken as UTC.

    Raises:
        ValueError: If ``value`` is not ISO 8601.
    """
    return _as_utc(datetime.fromisoformat(value.strip()))


def parse_free_form(value: str) -> datetime:
    """Parse ISO 8601, RFC 2822 or one of :data:`FALLBACK_FORMATS`.

    Raises:
        ValueError: If no supported representation matches.
    """
    text = value.strip()
    try:
        return parse_iso(text)
    except ValueError:
        pass
    try:
        return _as_utc(parsedate_to_datetime(text))
    except (TypeError, ValueError, IndexError):
        pass
    for fmt in FALLBACK_FORMATS:
        try:
            return _as_utc(datetime.strptime(text, fmt))
        except ValueError:
            continue
    raise ValueError(f"Unrecognised date string: {value!r}")


def parse_date(input: str, pattern: str | None = None) -> UtilityResponse:
    """Parse ``input`` (optionally with a pattern) into an ISO 8601 string."""
    try:
        if pattern:
            dt = _as_utc(datetime.strptime(input, pattern_to_strptime(pattern)))
        else:
            dt = parse_free_form(input)
    except DatePatternError as e:
        return error_response(str(e), "PARSE_ERROR")
    except ValueError:
        return error_response("Invalid date string", "INVALID_DATE")
    return success_response(to_iso(dt), input_type="string", output_type="string")


def format_date(iso_date: str, pattern: str) -> UtilityResponse:
    """Format an ISO 8601 date with a token pattern."""
    try:
        dt = parse_iso(iso_date)
    except ValueError:
        return error_response("Invalid ISO date string", "INVALID_DATE")
    try:
        result = format_with_pattern(dt, pattern)
    except DatePatternError as e:
        return error_response(str(e), "FORMAT_ERROR")
    return success_response(result, input_type="string", output_type="string")


def add_days(iso_date: str, days: int) -> UtilityResponse:
    """Shift an ISO 8601 date by ``days`` (negative to subtract)."""
    try:
        dt = parse_iso(iso_date)
    except ValueError:
        return error_response("Invalid ISO date string", "INVALID_DATE")
    try:
        shifted = dt + timedelta(days=days)
    except OverflowError as e:
        return error_response(f"Date out of range: {e}", "CALCULATION_ERROR")
    return success_response(to_iso(shifted), input_type="string", output_type="string")
