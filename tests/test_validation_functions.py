import pytest

from monolith.functions.validation import is_email, is_url, is_uuid


@pytest.mark.parametrize(
    "value, expected",
    [
        ("user@example.com", True),
        ("first.last+tag@sub.example.org", True),
        ("not-an-email", False),
        ("missing@", False),
        ("@missing.com", False),
        ("two@@example.com", False),
        ("", False),
    ],
)
def test_is_email(value, expected):
    response = is_email(value)
    assert response.success is True
    assert response.result is expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("https://example.com", True),
        ("http://example.com/path?q=1#frag", True),
        ("ftp://files.example.com", True),
        ("example.com", True),
        ("not a url", False),
        ("https://localhost", False),
        ("gopher://example.com", False),
        ("", False),
    ],
)
def test_is_url(value, expected):
    assert is_url(value).result is expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("550e8400-e29b-41d4-a716-446655440000", True),
        ("550E8400-E29B-41D4-A716-446655440000", True),
        ("not-a-uuid", False),
        ("550e8400e29b41d4a716446655440000", False),
        ("550e8400-e29b-41d4-a716-44665544000g", False),
    ],
)
def test_is_uuid(value, expected):
    assert is_uuid(value).result is expected


def test_validation_metadata():
    assert is_uuid("x").to_payload()["metadata"]["outputType"] == "boolean"
