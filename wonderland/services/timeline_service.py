# wonderland/services/timeline_service.py
from typing import Dict, List, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from wonderland.models import TimelineEvent
from wonderland.schemas.commons_schemas import PaginationParams
from .database_service import fetch_page


async def list_events(session: AsyncSession, pagination: PaginationParams) -> Tuple[List[Dict], int]:
    return await fetch_page(
        session, TimelineEvent, [], [TimelineEvent.sort_order.asc(), TimelineEvent.id.asc()],
        pagination.limit, pagination.offset,
    )
