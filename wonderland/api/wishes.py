# wonderland/api/wishes.py
"""
소원 벽 API (선택 인증 - 익명 작성 허용)
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from wonderland.api.deps import database_error, get_pagination, get_session, optional_identity
from wonderland.exceptions import AppError
from wonderland.schemas.commons_schemas import Identity, PaginationParams
from wonderland.services import stats_service, wish_service
from wonderland.transformers import create_pagination_meta, inputs, outputs, validators
from wonderland.utils.logger import logger

router = APIRouter(prefix="/wishes", tags=["wishes"])


@router.get("")
async def list_wishes(
    category: Optional[str] = Query(None),
    pagination: PaginationParams = Depends(get_pagination),
    session: AsyncSession = Depends(get_session),
):
    try:
        wishes, total = await wish_service.list_wishes(
            session, pagination, category=inputs.wish_category_filter(category)
        )
        meta = create_pagination_meta(pagination.page, pagination.limit, total)
        return outputs.paginated(wishes, meta, outputs.wish)

    except SQLAlchemyError as e:
        raise database_error(e, "소원 목록 조회") from e


@router.post("", status_code=201)
async def create_wish(
    body: Dict[str, Any] = Body(...),
    identity: Optional[Identity] = Depends(optional_identity),
    session: AsyncSession = Depends(get_session),
):
    try:
        wish = inputs.wish(body)
        validators.required(wish.name, "name")
        validators.required(wish.content, "content")

        user_id = identity.id if identity else None
        logger.info(f" 소원 등록 요청: user_id={user_id}, category={wish.category}")

        record = await wish_service.create_wish(session, wish, user_id)
        await stats_service.increment(session, "wishes_count")

        return outputs.success(outputs.wish(record), "Wish created successfully")

    except AppError:
        raise
    except SQLAlchemyError as e:
        raise database_error(e, "소원 등록") from e
