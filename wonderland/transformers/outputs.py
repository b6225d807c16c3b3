# wonderland/transformers/outputs.py
"""
출력 변환기 - 저장된 레코드를 응답용 JSON으로 변환

- 비밀 필드(password_hash)는 절대 포함하지 않음
- 날짜는 to_iso, 0/1 플래그는 to_bool로 정규화
- 없는 선택 필드는 None
"""

from typing import Any, Callable, Dict, List, Mapping, Optional

from .primitives import to_bool, to_int, to_iso

Record = Mapping[str, Any]
Shaper = Callable[[Record], Optional[Dict[str, Any]]]

_UNSET: Any = object()


def user(record: Optional[Record]) -> Optional[Dict[str, Any]]:
    if not record:
        return None
    return {
        "id": record.get("id"),
        "username": record.get("username"),
        "email": record.get("email"),
        "avatar": record.get("avatar") or None,
        "created_at": to_iso(record.get("created_at")),
    }


def wish(record: Optional[Record]) -> Optional[Dict[str, Any]]:
    if not record:
        return None
    return {
        "id": record.get("id"),
        "name": record.get("name"),
        "content": record.get("content"),
        "category": record.get("category"),
        "is_anonymous": to_bool(record.get("is_anonymous")),
        "created_at": to_iso(record.get("created_at")),
    }


def todo(record: Optional[Record]) -> Optional[Dict[str, Any]]:
    if not record:
        return None
    return {
        "id": record.get("id"),
        "title": record.get("title"),
        "description": record.get("description") or None,
        "completed": to_bool(record.get("completed")),
        "priority": record.get("priority"),
        "due_date": to_iso(record.get("due_date")),
        "created_at": to_iso(record.get("created_at")),
        "updated_at": to_iso(record.get("updated_at")),
    }


def timeline_event(record: Optional[Record]) -> Optional[Dict[str, Any]]:
    if not record:
        return None
    return {
        "id": record.get("id"),
        "title": record.get("title"),
        "event_date": record.get("event_date"),  # 표시용 문자열 그대로
        "meta": record.get("meta") or None,
        "description": record.get("description") or None,
        "created_at": to_iso(record.get("created_at")),
    }


def gallery_image(record: Optional[Record]) -> Optional[Dict[str, Any]]:
    if not record:
        return None
    return {
        "id": record.get("id"),
        "image_url": record.get("image_url"),
        "thumbnail_url": record.get("thumbnail_url") or record.get("image_url"),
        "label": record.get("label") or None,
        "description": record.get("description") or None,
        "category": record.get("category"),
        "created_at": to_iso(record.get("created_at")),
    }


def song(record: Optional[Record]) -> Optional[Dict[str, Any]]:
    if not record:
        return None
    return {
        "id": record.get("id"),
        "title": record.get("title"),
        "artist": record.get("artist") or None,
        "tag": record.get("tag") or None,
        "url": record.get("url") or None,
        "duration": record.get("duration") or None,
        "play_count": to_int(record.get("play_count"), 0),
        "created_at": to_iso(record.get("created_at")),
    }


def daily_stat(record: Optional[Record]) -> Dict[str, int]:
    """오늘 통계 행이 없으면 0으로 채움"""
    record = record or {}
    return {
        "visits": to_int(record.get("visit_count"), 0),
        "activeUsers": to_int(record.get("active_users"), 0),
        "newWishes": to_int(record.get("wishes_count"), 0),
        "newTodos": to_int(record.get("todos_count"), 0),
    }


# ---------------- 컬렉션 / Envelope ----------------

def collection(items: Any, shaper: Shaper) -> List[Optional[Dict[str, Any]]]:
    if not isinstance(items, (list, tuple)):
        return []
    return [shaper(item) for item in items]


def success(data: Any = _UNSET, message: Optional[str] = None) -> Dict[str, Any]:
    response: Dict[str, Any] = {"success": True}
    if message:
        response["message"] = message
    if data is not _UNSET:
        response["data"] = data
    return response


def error(message: str, details: Any = None) -> Dict[str, Any]:
    response: Dict[str, Any] = {"success": False, "error": message}
    if details:
        response["details"] = details
    return response


def paginated(items: Any, meta: Dict[str, Any], shaper: Optional[Shaper] = None) -> Dict[str, Any]:
    return {
        "success": True,
        "data": collection(items, shaper) if shaper else items,
        "pagination": meta,
    }
