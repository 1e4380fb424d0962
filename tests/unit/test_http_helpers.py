"""Tests for small HTTP helpers: query parsing and request id sanitization."""

import pytest

from app.api.v1.endpoints.users import INT64_MAX, INT64_MIN, parse_int_query
from app.middleware.request_id import sanitize_request_id


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, 0),
        ("", 0),
        ("abc", 0),
        ("1.5", 0),
        ("7", 7),
        ("+4", 4),
        ("-3", -3),
        (" 12 ", 0),
        ("1_000", 0),
        ("١٢", 0),
        (str(INT64_MAX), INT64_MAX),
        (str(INT64_MIN), INT64_MIN),
        (str(INT64_MAX + 1), 0),
        ("99999999999999999999", 0),
    ],
)
def test_parse_int_query(raw: str | None, expected: int) -> None:
    assert parse_int_query(raw) == expected


def test_sanitize_request_id_keeps_safe_values() -> None:
    assert sanitize_request_id("abc-123_X") == "abc-123_X"


@pytest.mark.parametrize("raw", [None, "", "has space", "x" * 65, "inject\nline"])
def test_sanitize_request_id_replaces_unsafe_values(raw: str | None) -> None:
    value = sanitize_request_id(raw)
    assert value != raw
    assert len(value) == 36
