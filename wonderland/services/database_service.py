# wonderland/services/database_service.py
"""
데이터베이스 서비스
SQLAlchemy 기반 비동기 DB 연결 (커넥션 풀은 앱 컨텍스트 단위)
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, List, Tuple

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from wonderland.models import Base, row_to_dict
from wonderland.utils.logger import logger


class DatabaseService:
    def __init__(self, database_url: str, pool_size: int = 10, echo: bool = False):
        engine_options = {"echo": echo, "pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_options.update(pool_size=pool_size, max_overflow=0, pool_recycle=3600)
        self.engine = create_async_engine(database_url, **engine_options)
        self.async_session = async_sessionmaker(self.engine, class_=AsyncSession, expire_on_commit=False)
        logger.info(" DatabaseService 초기화 완료")

    async def create_tables(self):
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info(" 데이터베이스 테이블 생성 완료")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """요청 단위 세션 - 예외가 나도 커넥션은 반드시 반환"""
        async with self.async_session() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def close(self):
        await self.engine.dispose()
        logger.info("🔌 데이터베이스 연결 종료")


async def fetch_page(session: AsyncSession, model, conditions, order_by, limit: int, offset: int) -> Tuple[List[Dict], int]:
    """조건에 맞는 한 페이지의 행(dict)과 전체 개수 조회"""
    query = select(model).where(*conditions).order_by(*order_by).limit(limit).offset(offset)
    result = await session.execute(query)
    rows = [row_to_dict(item) for item in result.scalars().all()]

    count_query = select(func.count()).select_from(model).where(*conditions)
    total = (await session.execute(count_query)).scalar_one()
    return rows, total
