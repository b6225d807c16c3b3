# wonderland/api/timeline.py
from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from wonderland.api.deps import database_error, get_pagination, get_session
from wonderland.schemas.commons_schemas import PaginationParams
from wonderland.services import timeline_service
from wonderland.transformers import create_pagination_meta, outputs

router = APIRouter(prefix="/timeline", tags=["timeline"])


@router.get("")
async def list_events(
    pagination: PaginationParams = Depends(get_pagination),
    session: AsyncSession = Depends(get_session),
):
    """크리스마스 일정 (sort_order 순)"""
    try:
        events, total = await timeline_service.list_events(session, pagination)
        meta = create_pagination_meta(pagination.page, pagination.limit, total)
        return outputs.paginated(events, meta, outputs.timeline_event)

    except SQLAlchemyError as e:
        raise database_error(e, "타임라인 조회") from e
