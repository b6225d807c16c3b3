# wonderland/api/auth.py
"""
계정 API - 회원가입 / 로그인 / 내 정보
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from wonderland.api.deps import database_error, get_context, get_session, require_identity
from wonderland.context import AppContext
from wonderland.exceptions import AppError, AuthenticationError, ConflictError, NotFoundError
from wonderland.schemas.commons_schemas import Identity
from wonderland.services import stats_service, user_service
from wonderland.transformers import inputs, outputs, validators
from wonderland.utils.logger import logger

router = APIRouter(prefix="/auth", tags=["auth"])

PASSWORD_MIN = 6
PASSWORD_MAX = 72  # bcrypt 입력 한도


def _issue_session(context: AppContext, user: Dict[str, Any]) -> Dict[str, Any]:
    identity = Identity(id=user["id"], username=user["username"], email=user["email"])
    return {"user": outputs.user(user), "token": context.tokens.issue(identity)}


@router.post("/register", status_code=201)
async def register(
    body: Dict[str, Any] = Body(...),
    context: AppContext = Depends(get_context),
    session: AsyncSession = Depends(get_session),
):
    try:
        registration = inputs.user_registration(body)
        validators.required(registration.username, "username")
        validators.required(registration.email, "email")
        validators.required(registration.password, "password")
        validators.length(registration.username, 2, inputs.USERNAME_MAX, "username")
        validators.email(registration.email)
        validators.length(registration.password, PASSWORD_MIN, PASSWORD_MAX, "password")

        logger.info(f" 회원가입 요청: username={registration.username}")

        if await user_service.user_exists(session, registration.username, registration.email):
            raise ConflictError("Username or email already exists")

        # bcrypt 연산은 스레드풀에서 실행
        password_hash = await run_in_threadpool(context.passwords.hash, registration.password)
        user = await user_service.create_user(session, registration.username, registration.email, password_hash)

        return outputs.success(_issue_session(context, user), "User registered successfully")

    except AppError:
        raise
    except SQLAlchemyError as e:
        raise database_error(e, "회원가입") from e


@router.post("/login")
async def login(
    body: Dict[str, Any] = Body(...),
    context: AppContext = Depends(get_context),
    session: AsyncSession = Depends(get_session),
):
    try:
        credentials = inputs.user_login(body)
        validators.required(credentials.username, "username")
        validators.required(credentials.password, "password")

        user = await user_service.get_user_by_login(session, credentials.username)
        verified = user is not None and await run_in_threadpool(
            context.passwords.verify, credentials.password, user["password_hash"]
        )
        if not verified:
            logger.warning(f" 로그인 실패: {credentials.username}")
            raise AuthenticationError("Invalid credentials")

        await stats_service.increment(session, "active_users")
        logger.info(f" 로그인 성공: user_id={user['id']}")
        return outputs.success(_issue_session(context, user), "Login successful")

    except AppError:
        raise
    except SQLAlchemyError as e:
        raise database_error(e, "로그인") from e


@router.get("/me")
async def me(
    identity: Identity = Depends(require_identity),
    session: AsyncSession = Depends(get_session),
):
    try:
        user = await user_service.get_user_by_id(session, identity.id)
        if not user:
            raise NotFoundError("User not found")
        return outputs.success(outputs.user(user))

    except AppError:
        raise
    except SQLAlchemyError as e:
        raise database_error(e, "사용자 조회") from e
