# wonderland/api/stats.py
"""
사이트 통계 API
"""

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from wonderland.api.deps import database_error, get_session
from wonderland.services import stats_service, todo_service, user_service, wish_service
from wonderland.transformers import outputs

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("")
async def get_stats(session: AsyncSession = Depends(get_session)):
    try:
        today = await stats_service.get_daily(session)
        return outputs.success({
            "today": outputs.daily_stat(today),
            "total": {
                "wishes": await wish_service.count_wishes(session),
                "todos": await todo_service.count_todos(session),
                "users": await user_service.count_users(session),
            },
        })

    except SQLAlchemyError as e:
        raise database_error(e, "통계 조회") from e


@router.post("/visit")
async def record_visit(session: AsyncSession = Depends(get_session)):
    try:
        await stats_service.increment(session, "visit_count")
        return outputs.success(message="Visit recorded")

    except SQLAlchemyError as e:
        raise database_error(e, "방문 기록") from e
