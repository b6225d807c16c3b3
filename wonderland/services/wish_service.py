# wonderland/services/wish_service.py
"""
소원 목록/등록
"""

from typing import Dict, List, Optional, Tuple

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from wonderland.models import Wish, row_to_dict
from wonderland.schemas.commons_schemas import PaginationParams
from wonderland.schemas.wish_schemas import WishCreate
from .database_service import fetch_page


async def list_wishes(session: AsyncSession, pagination: PaginationParams,
                      category: Optional[str] = None) -> Tuple[List[Dict], int]:
    conditions = [Wish.category == category] if category else []
    return await fetch_page(
        session, Wish, conditions, [Wish.created_at.desc(), Wish.id.desc()],
        pagination.limit, pagination.offset,
    )


async def create_wish(session: AsyncSession, wish: WishCreate, user_id: Optional[int]) -> Dict:
    record = Wish(user_id=user_id, **wish.model_dump())
    session.add(record)
    await session.commit()
    await session.refresh(record)
    return row_to_dict(record)


async def count_wishes(session: AsyncSession) -> int:
    return (await session.execute(select(func.count()).select_from(Wish))).scalar_one()
