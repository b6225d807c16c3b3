# wonderland/services/auth_service.py
"""
인증 서비스

- TokenService: HS256 JWT 발급/검증 (상태 없음, DB 조회 없음)
- PasswordHasher: bcrypt 해시/검증
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt
from jwt import InvalidTokenError
from pydantic import ValidationError as PydanticValidationError

from wonderland.exceptions import AuthenticationError, AuthorizationError
from wonderland.schemas.commons_schemas import Identity


class TokenService:
    def __init__(self, secret: str, algorithm: str = "HS256", expires_days: int = 7):
        self.secret = secret
        self.algorithm = algorithm
        self.expires_in = timedelta(days=expires_days)

    def issue(self, identity: Identity, now: Optional[datetime] = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "id": identity.id,
            "username": identity.username,
            "email": identity.email,
            "iat": issued_at,
            "exp": issued_at + self.expires_in,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Identity:
        """서명/만료 검증 후 Identity 반환, 실패 시 AuthorizationError"""
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "iat"]},
            )
            return Identity(id=payload["id"], username=payload["username"], email=payload["email"])
        except (InvalidTokenError, KeyError, PydanticValidationError):
            raise AuthorizationError("Invalid or expired token")


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """'Bearer <token>' 헤더에서 토큰 추출"""
    if not authorization:
        return None
    parts = authorization.split(" ")
    if len(parts) < 2 or not parts[1]:
        return None
    return parts[1]


def authenticate(tokens: TokenService, authorization: Optional[str]) -> Identity:
    """필수 인증 - 토큰 없음 401, 토큰 불량 403"""
    token = extract_bearer_token(authorization)
    if not token:
        raise AuthenticationError("Access token required")
    return tokens.verify(token)


def authenticate_optional(tokens: TokenService, authorization: Optional[str]) -> Optional[Identity]:
    """선택 인증 - 토큰이 없거나 불량이면 익명(None)"""
    token = extract_bearer_token(authorization)
    if not token:
        return None
    try:
        return tokens.verify(token)
    except AuthorizationError:
        return None


BCRYPT_MAX_BYTES = 72


def _encode_password(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


class PasswordHasher:
    def __init__(self, rounds: int = 10):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        return bcrypt.hashpw(_encode_password(password), bcrypt.gensalt(rounds=self.rounds)).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        if not password or not password_hash:
            return False
        try:
            return bcrypt.checkpw(_encode_password(password), password_hash.encode("utf-8"))
        except ValueError:
            return False
