# wonderland/services/music_service.py
from typing import Dict, List, Optional, Tuple

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from wonderland.models import Song, row_to_dict
from wonderland.schemas.commons_schemas import PaginationParams
from .database_service import fetch_page


async def list_songs(session: AsyncSession, pagination: PaginationParams) -> Tuple[List[Dict], int]:
    return await fetch_page(
        session, Song, [], [Song.sort_order.asc(), Song.id.asc()],
        pagination.limit, pagination.offset,
    )


async def increment_play_count(session: AsyncSession, song_id: int) -> Optional[Dict]:
    """재생 수 원자적 증가 - 곡이 없으면 None"""
    result = await session.execute(
        update(Song).where(Song.id == song_id).values(play_count=Song.play_count + 1)
    )
    await session.commit()
    if result.rowcount == 0:
        return None
    song = await session.get(Song, song_id, populate_existing=True)
    return row_to_dict(song) if song else None
