# wonderland/services/stats_service.py
"""
일일 통계 서비스

카운터 증가는 DB의 upsert(충돌 시 증가)에 맡긴다 - 애플리케이션 락 없음.
"""

from datetime import date
from typing import Dict, Optional

from sqlalchemy import select
from sqlalchemy.dialects import mysql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from wonderland.models import SiteStat, row_to_dict, utcnow
from wonderland.utils.logger import logger

COUNTERS = ("visit_count", "active_users", "wishes_count", "todos_count")


def _upsert_statement(dialect_name: str, counter: str, day: date):
    column = getattr(SiteStat, counter)
    values = {"stat_date": day, counter: 1}
    if dialect_name == "mysql":
        stmt = mysql.insert(SiteStat).values(**values)
        return stmt.on_duplicate_key_update({counter: column + 1, "updated_at": utcnow()})
    if dialect_name == "sqlite":
        stmt = sqlite.insert(SiteStat).values(**values)
        return stmt.on_conflict_do_update(
            index_elements=[SiteStat.stat_date],
            set_={counter: column + 1, "updated_at": utcnow()},
        )
    raise ValueError(f"Unsupported dialect for stats upsert: {dialect_name}")


async def increment(session: AsyncSession, counter: str, day: Optional[date] = None):
    """오늘(또는 지정일) 카운터 +1"""
    if counter not in COUNTERS:
        raise ValueError(f"Unknown stats counter: {counter}")
    day = day or date.today()
    stmt = _upsert_statement(session.get_bind().dialect.name, counter, day)
    await session.execute(stmt)
    await session.commit()
    logger.debug(f" 통계 증가: {counter} ({day.isoformat()})")


async def get_daily(session: AsyncSession, day: Optional[date] = None) -> Optional[Dict]:
    day = day or date.today()
    result = await session.execute(select(SiteStat).where(SiteStat.stat_date == day))
    stat = result.scalar_one_or_none()
    return row_to_dict(stat) if stat else None
