# wonderland/api/deps.py
"""
공통 의존성 - 컨텍스트 / DB 세션 / 인증 게이트 / 페이지네이션
"""

from typing import AsyncIterator, Optional

from fastapi import Depends, Header, Query, Request
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from wonderland.context import AppContext
from wonderland.exceptions import AppError, ConflictError, UpstreamError
from wonderland.schemas.commons_schemas import Identity, PaginationParams
from wonderland.services.auth_service import authenticate, authenticate_optional
from wonderland.transformers.pagination import normalize_pagination
from wonderland.utils.logger import logger


def get_context(request: Request) -> AppContext:
    return request.app.state.context


async def get_session(context: AppContext = Depends(get_context)) -> AsyncIterator[AsyncSession]:
    """요청마다 풀에서 세션 획득, 종료 시 반환"""
    async with context.database.session() as session:
        yield session


def require_identity(
    authorization: Optional[str] = Header(None),
    context: AppContext = Depends(get_context),
) -> Identity:
    return authenticate(context.tokens, authorization)


def optional_identity(
    authorization: Optional[str] = Header(None),
    context: AppContext = Depends(get_context),
) -> Optional[Identity]:
    return authenticate_optional(context.tokens, authorization)


def get_pagination(
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    context: AppContext = Depends(get_context),
) -> PaginationParams:
    return normalize_pagination(
        page,
        limit,
        max_limit=context.settings.max_page_limit,
        default_limit=context.settings.default_page_limit,
    )


def database_error(exc: SQLAlchemyError, action: str) -> AppError:
    """DB 예외를 API 에러로 변환 (제약 위반은 409, 나머지는 500)"""
    if isinstance(exc, IntegrityError):
        logger.warning(f" {action} 제약 조건 위반: {exc.orig}")
        return ConflictError("Resource conflicts with existing data")
    logger.error(f" {action} 실패: {exc}")
    return UpstreamError("Database error")
