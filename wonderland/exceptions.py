# wonderland/exceptions.py
"""
에러 분류 체계

모든 API 에러는 AppError 하위 클래스로 표현되고,
main.py의 예외 핸들러가 공통 에러 envelope으로 변환한다.
"""

from typing import Any, Optional


class AppError(Exception):
    status_code = 500

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(AppError):
    """잘못된 입력 / 필수값 누락 / 범위 초과"""
    status_code = 400


class AuthenticationError(AppError):
    """인증 정보 없음"""
    status_code = 401


class AuthorizationError(AppError):
    """토큰 위조 또는 만료"""
    status_code = 403


class NotFoundError(AppError):
    status_code = 404


class ConflictError(AppError):
    """유니크 제약 위반"""
    status_code = 409


class UpstreamError(AppError):
    """DB / 파일 시스템 실패 - 내부 메시지는 호출자에게 노출하지 않음"""
    status_code = 500
