import pytest

from monolith.functions.dates import (
    DatePatternError,
    add_days,
    format_date,
    parse_date,
    pattern_to_strptime,
    to_iso,
    tokenize,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2025-12-11", "2025-12-11T00:00:00.000Z"),
        ("2025-12-11T10:30:00", "2025-12-11T10:30:00.000Z"),
        ("2025-12-11T10:30:00+02:00", "2025-12-11T08:30:00.000Z"),
        ("2025-12-11T10:30:00.250Z", "2025-12-11T10:30:00.250Z"),
        ("December 11, 2025", "2025-12-11T00:00:00.000Z"),
        ("Thu, 11 Dec 2025 10:00:00 GMT", "2025-12-11T10:00:00.000Z"),
    ],
)
def test_parse_date_free_form(value, expected):
    response = parse_date(value)
    assert response.success is True
    assert response.result == expected


def test_parse_date_with_pattern():
    assert parse_date("11/12/2025", "dd/MM/yyyy").result == "2025-12-11T00:00:00.000Z"
    assert (
        parse_date("2025-12-11 14:05", "yyyy-MM-dd HH:mm").result
        == "2025-12-11T14:05:00.000Z"
    )


def test_parse_date_invalid():
    response = parse_date("definitely not a date")
    assert response.to_payload() == {
        "success": False,
        "error": "Invalid date string",
        "errorCode": "INVALID_DATE",
    }


def test_parse_date_pattern_mismatch():
    assert parse_date("2025-13-01", "yyyy-MM-dd").error_code == "INVALID_DATE"


def test_parse_date_unsupported_pattern():
    response = parse_date("2025", "yyyy QQ")
    assert response.error_code == "PARSE_ERROR"
    assert "QQ" in response.error


@pytest.mark.parametrize(
    "pattern, expected",
    [
        ("MMMM d, yyyy", "December 11, 2025"),
        ("yyyy-MM-dd", "2025-12-11"),
        ("EEEE, MMM dd 'at' HH:mm", "Thursday, Dec 11 at 15:05"),
        ("h:mm a", "3:05 PM"),
        ("h 'o''clock'", "3 o'clock"),
        ("yyyy-MM-dd'T'HH:mm:ss.SSSXXX", "2025-12-11T15:05:09.123Z"),
    ],
)
def test_format_date(pattern, expected):
    assert format_date("2025-12-11T15:05:09.123Z", pattern).result == expected


def test_format_date_keeps_offset():
    assert format_date("2025-12-11T10:00:00+02:00", "HH XXX").result == "10 +02:00"


def test_format_date_invalid_iso():
    response = format_date("yesterday", "yyyy")
    assert response.error == "Invalid ISO date string"
    assert response.error_code == "INVALID_DATE"


def test_format_date_bad_pattern():
    assert format_date("2025-12-11", "yyyy QQ").error_code == "FORMAT_ERROR"


@pytest.mark.parametrize(
    "iso_date, days, expected",
    [
        ("2025-12-11T00:00:00.000Z", 7, "2025-12-18T00:00:00.000Z"),
        ("2025-12-11T00:00:00.000Z", -11, "2025-11-30T00:00:00.000Z"),
        ("2024-02-28", 1, "2024-02-29T00:00:00.000Z"),
        ("2025-12-31T23:00:00Z", 0, "2025-12-31T23:00:00.000Z"),
    ],
)
def test_add_days(iso_date, days, expected):
    assert add_days(iso_date, days).result == expected


def test_add_days_invalid():
    assert add_days("not-a-date", 1).error_code == "INVALID_DATE"


def test_add_days_out_of_range():
    assert add_days("9999-12-31", 1).error_code == "CALCULATION_ERROR"


def test_tokenize_literals():
    assert list(tokenize("yyyy'-'MM")) == [(True, "yyyy"), (False, "-"), (True, "MM")]
    assert list(tokenize("''")) == [(False, "'")]


def test_tokenize_rejects_unknown_letters():
    with pytest.raises(DatePatternError):
        list(tokenize("yyyy-ww"))


def test_pattern_to_strptime_escapes_percent():
    assert pattern_to_strptime("d%M") == "%d%%%m"


def test_to_iso_naive_is_utc():
    from datetime import datetime

    assert to_iso(datetime(2025, 1, 2, 3, 4, 5, 678000)) == "2025-01-02T03:04:05.678Z"
