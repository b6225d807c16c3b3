# wonderland/transformers/validators.py
"""
검증기 - 실패 시 필드명을 담은 ValidationError 발생

enum 처리 정책은 두 가지를 구분한다.
- assert_enum: 허용값이 아니면 거부
- coerce_enum: 허용값이 아니면 기본값으로 조용히 대체
"""

import re
from typing import Any, Sequence

from wonderland.exceptions import ValidationError

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def required(value: Any, field: str) -> bool:
    if value is None or value == "":
        raise ValidationError(f"{field} is required")
    return True


def email(value: Any) -> bool:
    if not isinstance(value, str) or not EMAIL_PATTERN.fullmatch(value):
        raise ValidationError("Invalid email format")
    return True


def length(value: Any, minimum: int, maximum: int, field: str) -> bool:
    size = len(value) if value else 0
    if size < minimum or size > maximum:
        raise ValidationError(f"{field} must be between {minimum} and {maximum} characters")
    return True


def assert_enum(value: Any, allowed: Sequence[str], field: str) -> bool:
    if value not in allowed:
        raise ValidationError(f"{field} must be one of: {', '.join(allowed)}")
    return True


def coerce_enum(value: Any, allowed: Sequence[str], default: str) -> str:
    return value if value in allowed else default
