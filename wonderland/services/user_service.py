# wonderland/services/user_service.py
"""
사용자 조회/생성
"""

from typing import Dict, Optional

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from wonderland.exceptions import ConflictError
from wonderland.models import User, row_to_dict
from wonderland.utils.logger import logger


async def get_user_by_id(session: AsyncSession, user_id: int) -> Optional[Dict]:
    user = await session.get(User, user_id)
    return row_to_dict(user) if user else None


async def get_user_by_login(session: AsyncSession, ident: str) -> Optional[Dict]:
    """사용자명 또는 이메일로 조회"""
    query = select(User).where(or_(User.username == ident, User.email == ident.lower())).limit(1)
    result = await session.execute(query)
    user = result.scalar_one_or_none()
    return row_to_dict(user) if user else None


async def user_exists(session: AsyncSession, username: str, email: str) -> bool:
    query = select(User.id).where(or_(User.username == username, User.email == email)).limit(1)
    result = await session.execute(query)
    return result.first() is not None


async def create_user(session: AsyncSession, username: str, email: str, password_hash: str) -> Dict:
    user = User(username=username, email=email, password_hash=password_hash)
    session.add(user)
    try:
        await session.commit()
    except IntegrityError as e:
        await session.rollback()
        logger.warning(f" 사용자 중복: username={username}, email={email}")
        raise ConflictError("Username or email already exists") from e
    await session.refresh(user)
    return row_to_dict(user)


async def count_users(session: AsyncSession) -> int:
    return (await session.execute(select(func.count()).select_from(User))).scalar_one()
