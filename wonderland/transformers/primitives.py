# wonderland/transformers/primitives.py
"""
기본 변환기 - 문자열 / 숫자 / 날짜 / 불리언

모두 순수 함수이며 예외를 던지지 않는다 (to_date 제외).
"""

import math
import re
from datetime import date, datetime, time, timezone
from typing import Any, Optional

from dateutil import parser as date_parser

from wonderland.exceptions import ValidationError

_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0B-\x0C\x0E-\x1F\x7F]")
_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

_HTML_ESCAPES = (
    ("&", "&amp;"),  # must run first
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)

_TRUE_STRINGS = {"true", "1", "yes"}


# ---------------- String ----------------

def sanitize_string(value: Any) -> str:
    if not isinstance(value, str):
        return ""
    return _CONTROL_CHARS.sub("", value).strip()


def truncate(value: Any, max_length: int) -> str:
    sanitized = sanitize_string(value)
    return sanitized[:max(max_length, 0)]


def escape_html(value: Any) -> str:
    escaped = sanitize_string(value)
    for char, entity in _HTML_ESCAPES:
        escaped = escaped.replace(char, entity)
    return escaped


# ---------------- Number ----------------

def to_int(value: Any, default: int = 0) -> int:
    """관대한 정수 파싱 ("12abc" -> 12), 실패 시 default"""
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else default
    if isinstance(value, str):
        match = _INT_PREFIX.match(value)
        return int(match.group(1)) if match else default
    return default


def to_float(value: Any, default: float = 0.0) -> float:
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, (int, float)):
        return default if math.isnan(value) else float(value)
    if isinstance(value, str):
        match = _FLOAT_PREFIX.match(value)
        return float(match.group(1)) if match else default
    return default


def clamp(value: Any, minimum: float, maximum: float):
    numeric = isinstance(value, (int, float)) and not isinstance(value, bool)
    if not numeric or math.isnan(value):
        value = to_float(value)
    return min(max(value, minimum), maximum)


# ---------------- Date ----------------

def _parse_datetime(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        # epoch milliseconds
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    if isinstance(value, str):
        return date_parser.parse(value)
    return None


def to_iso(value: Any) -> Optional[str]:
    """ISO-8601 (UTC, 밀리초, Z 접미사) 문자열로 변환. 실패 시 None"""
    if not value:
        return None
    try:
        parsed = _parse_datetime(value)
        if parsed is not None and parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    except (ValueError, OverflowError, OSError):
        return None
    if parsed is None:
        return None
    return f"{parsed.isoformat(timespec='milliseconds')}Z"


def to_date(value: Any, field: str = "date") -> Optional[date]:
    """마감일 등 DATE 컬럼용. 비어 있으면 None, 해석 불가면 ValidationError"""
    if value is None or (isinstance(value, str) and not sanitize_string(value)):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        parsed = _parse_datetime(sanitize_string(value) if isinstance(value, str) else value)
    except (ValueError, OverflowError, OSError):
        parsed = None
    if parsed is None:
        raise ValidationError(f"{field} must be a valid date")
    return parsed.date()


# ---------------- Boolean ----------------

def to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.lower() in _TRUE_STRINGS
    return value is not None
