from datetime import date, datetime, timezone

import pytest

from wonderland.exceptions import ValidationError
from wonderland.transformers.primitives import (
    clamp,
    escape_html,
    sanitize_string,
    to_bool,
    to_date,
    to_float,
    to_int,
    to_iso,
    truncate,
)

CONTROL_CHARS = [chr(c) for c in list(range(0x00, 0x09)) + [0x0B, 0x0C] + list(range(0x0E, 0x20)) + [0x7F]]

SAMPLES = [
    "  hello  ",
    "\x00\x07 bell \x1f",
    " \x00  spaced",
    "tab\tinside\nnewline",
    "\x7f",
    "",
    "  ",
    "Frohe Weihnachten ❄",
]


# --- sanitize_string ---

@pytest.mark.parametrize("value", SAMPLES)
def test_sanitize_strips_control_chars_and_whitespace(value):
    result = sanitize_string(value)
    assert not any(ch in result for ch in CONTROL_CHARS)
    assert result == result.strip()


@pytest.mark.parametrize("value", SAMPLES)
def test_sanitize_is_idempotent(value):
    once = sanitize_string(value)
    assert sanitize_string(once) == once


@pytest.mark.parametrize("value", [None, 42, 3.5, ["a"], {"a": 1}, True])
def test_sanitize_non_string_is_empty(value):
    assert sanitize_string(value) == ""


def test_sanitize_keeps_inner_tabs_and_newlines():
    assert sanitize_string(" a\tb\nc ") == "a\tb\nc"


# --- truncate / escape_html ---

@pytest.mark.parametrize("max_len", [0, 1, 5, 100])
def test_truncate_respects_max_length(max_len):
    assert len(truncate("  a fairly long wish for snow  ", max_len)) <= max_len


def test_truncate_sanitizes_first():
    assert truncate("   Santa\x00   ", 3) == "San"


def test_escape_html_removes_angle_brackets():
    result = escape_html("<script>alert('x')</script>")
    assert "<" not in result and ">" not in result
    assert result == "&lt;script&gt;alert(&#039;x&#039;)&lt;/script&gt;"


def test_escape_html_escapes_ampersand_once():
    assert escape_html('Tom & "Jerry"') == "Tom &amp; &quot;Jerry&quot;"


# --- numbers ---

@pytest.mark.parametrize("value,expected", [
    ("12", 12), ("12abc", 12), ("  -7", -7), (3.9, 3), (5, 5),
    ("abc", 0), (None, 0), ("", 0), (True, 0), (float("nan"), 0),
])
def test_to_int(value, expected):
    assert to_int(value) == expected


def test_to_int_custom_default():
    assert to_int("nope", 20) == 20


@pytest.mark.parametrize("value,expected", [
    ("3.14", 3.14), ("2.5kg", 2.5), (".5", 0.5), ("1e3", 1000.0), (7, 7.0), ("x", 0.0),
])
def test_to_float(value, expected):
    assert to_float(value) == expected


@pytest.mark.parametrize("value", [-100, -1, 0, 0.5, 1, 50, 1000, "77", "junk", None, float("nan")])
def test_clamp_within_bounds_and_idempotent(value):
    once = clamp(value, 1, 100)
    assert 1 <= once <= 100
    assert clamp(once, 1, 100) == once


def test_clamp_parses_strings():
    assert clamp("250", 0, 100) == 100


# --- dates ---

def test_to_iso_from_datetime():
    assert to_iso(datetime(2024, 12, 25, 8, 30)) == "2024-12-25T08:30:00.000Z"


def test_to_iso_converts_aware_datetime_to_utc():
    value = datetime(2024, 12, 25, 9, 0, tzinfo=timezone.utc).astimezone()
    assert to_iso(value) == "2024-12-25T09:00:00.000Z"


def test_to_iso_from_date_and_string():
    assert to_iso(date(2024, 12, 24)) == "2024-12-24T00:00:00.000Z"
    assert to_iso("2024-12-24T18:00:00Z") == "2024-12-24T18:00:00.000Z"


@pytest.mark.parametrize("value", [None, "", 0, "snowflake", "2024-02-30"])
def test_to_iso_returns_none_for_bad_input(value):
    assert to_iso(value) is None


def test_to_date():
    assert to_date("2024-12-24") == date(2024, 12, 24)
    assert to_date(datetime(2024, 12, 24, 10, 0)) == date(2024, 12, 24)
    assert to_date(None) is None
    assert to_date("   ") is None


def test_to_date_rejects_garbage():
    with pytest.raises(ValidationError, match="due_date"):
        to_date("someday", "due_date")


# --- booleans ---

@pytest.mark.parametrize("value,expected", [
    (True, True), (False, False),
    (1, True), (0, False), (-2, True), (0.0, False),
    ("true", True), ("TRUE", True), ("1", True), ("yes", True), ("Yes", True),
    ("0", False), ("false", False), ("", False), ("no", False),
    (None, False), ([], True), ({}, True),
])
def test_to_bool(value, expected):
    assert to_bool(value) is expected


def test_to_iso_pads_early_years():
    assert to_iso(datetime(5, 1, 1)) == "0005-01-01T00:00:00.000Z"
    assert to_iso(date(999, 12, 31)) == "0999-12-31T00:00:00.000Z"


def test_to_iso_truncates_to_milliseconds():
    assert to_iso(datetime(2024, 12, 25, 8, 30, 0, 123999)) == "2024-12-25T08:30:00.123Z"
