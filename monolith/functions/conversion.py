"""CSV <-> JSON conversion.

CSV output uses ``\\n`` line separators and no trailing newline. Parsing
treats the first row as the header, skips blank lines and keeps every value
as a string.
"""

from __future__ import annotations

import csv
import io
import json
from typing import Any

from ..responses import UtilityResponse, error_response, success_response


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, dict | list):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def json_to_csv(input: list[dict[str, Any]]) -> UtilityResponse:
    """Render records as CSV.

    The header is the union of record keys in first-seen order; records
    lacking a key get an empty cell.
    """
    if not input:
        return success_response("", input_type="array", output_type="string")

    fields: list[str] = []
    for record in input:
        fields.extend(k for k in record if k not in fields)

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    try:
        writer.writerow(fields)
        for record in input:
            writer.writerow([_cell(record.get(f)) for f in fields])
    except (csv.Error, TypeError, ValueError) as e:
        return error_response(f"Failed to convert JSON to CSV: {e}", "CONVERSION_ERROR")
    return success_response(
        buffer.getvalue().rstrip("\n"), input_type="array", output_type="string"
    )


def csv_to_json(input: str) -> UtilityResponse:
    """Parse CSV with a header row into a list of records.

    Rows whose field count differs from the header are reported together in a
    ``PARSE_ERROR`` envelope whose ``details`` list every offending row.
    """
    rows = []
    try:
        for row in csv.reader(io.StringIO(input, newline="")):
            if not row or row == [""]:
                continue
            rows.append(row)
    except csv.Error as e:
        return error_response(f"CSV parsing errors: {e}", "PARSE_ERROR")

    if not rows:
        return success_response([], input_type="string", output_type="array")

    header, body = rows[0], rows[1:]
    records: list[dict[str, str]] = []
    errors: list[dict[str, Any]] = []
    for index, row in enumerate(body):
        if len(row) != len(header):
            code = "TooFewFields" if len(row) < len(header) else "TooManyFields"
            errors.append(
                {
                    "type": "FieldMismatch",
                    "code": code,
                    "message": (
                        f"Too {'few' if code == 'TooFewFields' else 'many'} fields: "
                        f"expected {len(header)} fields but parsed {len(row)}"
                    ),
                    "row": index,
                }
            )
        records.append(dict(zip(header, row, strict=False)))

    if errors:
        return error_response(
            f"CSV parsing errors: {', '.join(e['message'] for e in errors)}",
            "PARSE_ERROR",
            errors,
        )
    return success_response(records, input_type="string", output_type="array")
