# wonderland/schemas/user_schemas.py
"""
계정 관련 입력 DTO
"""

from pydantic import BaseModel


class UserRegistration(BaseModel):
    username: str
    email: str
    password: str  # 해싱은 PasswordHasher 담당


class UserLogin(BaseModel):
    username: str  # 사용자명 또는 이메일
    password: str
