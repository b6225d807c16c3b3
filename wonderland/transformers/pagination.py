# wonderland/transformers/pagination.py
import math
from typing import Any, Dict

from wonderland.schemas.commons_schemas import MAX_SQL_INTEGER, PaginationParams
from .primitives import clamp, to_int

DEFAULT_LIMIT = 20
MAX_LIMIT = 100


def normalize_pagination(page: Any, limit: Any, max_limit: int = MAX_LIMIT,
                         default_limit: int = DEFAULT_LIMIT) -> PaginationParams:
    """page/limit 쿼리 파라미터 정규화 (page >= 1, 1 <= limit <= max_limit)

    page * limit 이 BIGINT 범위를 넘지 않도록 page 상한을 둔다.
    """
    normalized_limit = int(clamp(to_int(limit, default_limit), 1, max_limit))
    normalized_page = min(max(1, to_int(page, 1)), MAX_SQL_INTEGER // normalized_limit)
    return PaginationParams(
        page=normalized_page,
        limit=normalized_limit,
        offset=(normalized_page - 1) * normalized_limit,
    )


def create_pagination_meta(page: int, limit: int, total: int) -> Dict[str, Any]:
    return {
        "page": page,
        "limit": limit,
        "total": total,
        "totalPages": math.ceil(total / limit) if limit else 0,
        "hasNextPage": page * limit < total,
        "hasPreviousPage": page > 1,
    }
