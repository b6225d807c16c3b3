# wonderland/api/music.py
"""
플레이리스트 API
"""

from fastapi import APIRouter, Depends, Path
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from wonderland.api.deps import database_error, get_pagination, get_session
from wonderland.exceptions import AppError, NotFoundError
from wonderland.schemas.commons_schemas import MAX_SQL_INTEGER, PaginationParams
from wonderland.services import music_service
from wonderland.transformers import create_pagination_meta, outputs

router = APIRouter(prefix="/music", tags=["music"])


@router.get("")
async def list_songs(
    pagination: PaginationParams = Depends(get_pagination),
    session: AsyncSession = Depends(get_session),
):
    try:
        songs, total = await music_service.list_songs(session, pagination)
        meta = create_pagination_meta(pagination.page, pagination.limit, total)
        return outputs.paginated(songs, meta, outputs.song)

    except SQLAlchemyError as e:
        raise database_error(e, "플레이리스트 조회") from e


@router.post("/{song_id}/play")
async def play_song(
    song_id: int = Path(..., le=MAX_SQL_INTEGER),
    session: AsyncSession = Depends(get_session),
):
    try:
        song = await music_service.increment_play_count(session, song_id)
        if not song:
            raise NotFoundError("Song not found")
        return outputs.success(outputs.song(song), "Play count incremented")

    except AppError:
        raise
    except SQLAlchemyError as e:
        raise database_error(e, "재생 수 증가") from e
