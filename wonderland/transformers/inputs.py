# wonderland/transformers/inputs.py
"""
입력 변환기 - 원시 요청 바디를 정제된 DTO로 변환

길이 제한은 DB 컬럼 크기에 맞추고, 잘못된 enum 값은 기본값으로 대체한다.
비밀번호는 변환하지 않는다 (해싱은 PasswordHasher 담당).
"""

from typing import Any, Dict, Mapping, Optional

from wonderland.schemas.user_schemas import UserLogin, UserRegistration
from wonderland.schemas.wish_schemas import DEFAULT_WISH_CATEGORY, WISH_CATEGORIES, WishCreate
from wonderland.schemas.todo_schemas import DEFAULT_TODO_PRIORITY, TODO_PRIORITIES, TodoCreate, TodoPatch
from wonderland.schemas.gallery_schemas import DEFAULT_GALLERY_CATEGORY, GalleryImageCreate
from .primitives import to_bool, to_date, truncate
from .validators import coerce_enum

USERNAME_MAX = 50
EMAIL_MAX = 100
WISH_NAME_MAX = 100
WISH_CONTENT_MAX = 1000
TODO_TITLE_MAX = 255
TODO_DESCRIPTION_MAX = 1000
GALLERY_LABEL_MAX = 100
GALLERY_DESCRIPTION_MAX = 500
GALLERY_CATEGORY_MAX = 50


def _password(data: Mapping[str, Any]) -> str:
    password = data.get("password")
    return password if isinstance(password, str) else ""


def _optional_text(value: Any, max_length: int) -> Optional[str]:
    return truncate(value, max_length) or None


def user_registration(data: Mapping[str, Any]) -> UserRegistration:
    return UserRegistration(
        username=truncate(data.get("username"), USERNAME_MAX),
        email=truncate(data.get("email"), EMAIL_MAX).lower(),
        password=_password(data),
    )


def user_login(data: Mapping[str, Any]) -> UserLogin:
    return UserLogin(
        username=truncate(data.get("username"), EMAIL_MAX),
        password=_password(data),
    )


def wish(data: Mapping[str, Any]) -> WishCreate:
    return WishCreate(
        name=truncate(data.get("name"), WISH_NAME_MAX),
        content=truncate(data.get("content"), WISH_CONTENT_MAX),
        category=coerce_enum(data.get("category"), WISH_CATEGORIES, DEFAULT_WISH_CATEGORY),
        is_anonymous=to_bool(data.get("is_anonymous")),
    )


def _todo_fields(data: Mapping[str, Any]) -> Dict[str, Any]:
    # 입력에 존재하는 키만 변환
    fields: Dict[str, Any] = {}
    if "title" in data:
        fields["title"] = truncate(data["title"], TODO_TITLE_MAX)
    if "description" in data:
        fields["description"] = _optional_text(data["description"], TODO_DESCRIPTION_MAX)
    if "priority" in data:
        fields["priority"] = coerce_enum(data["priority"], TODO_PRIORITIES, DEFAULT_TODO_PRIORITY)
    if "due_date" in data:
        fields["due_date"] = to_date(data["due_date"], "due_date")
    if "completed" in data:
        fields["completed"] = to_bool(data["completed"])
    return fields


def todo(data: Mapping[str, Any]) -> TodoCreate:
    fields = _todo_fields(data)
    fields.setdefault("title", "")
    return TodoCreate(**fields)


def todo_patch(data: Mapping[str, Any]) -> TodoPatch:
    return TodoPatch(**_todo_fields(data))


def gallery_image(data: Mapping[str, Any]) -> GalleryImageCreate:
    return GalleryImageCreate(
        label=_optional_text(data.get("label"), GALLERY_LABEL_MAX),
        description=_optional_text(data.get("description"), GALLERY_DESCRIPTION_MAX),
        category=truncate(data.get("category"), GALLERY_CATEGORY_MAX) or DEFAULT_GALLERY_CATEGORY,
    )


# ---------------- 목록 필터 ----------------

def wish_category_filter(value: Any) -> Optional[str]:
    return value if value in WISH_CATEGORIES else None


def todo_priority_filter(value: Any) -> Optional[str]:
    return value if value in TODO_PRIORITIES else None


def completed_filter(value: Any) -> Optional[bool]:
    return None if value is None else to_bool(value)


def gallery_category_filter(value: Any) -> Optional[str]:
    return truncate(value, GALLERY_CATEGORY_MAX) or None
