# wonderland/schemas/commons_schemas.py
"""
공통 스키마 - 여러 API에서 공유하는 스키마들
"""

from pydantic import BaseModel, ConfigDict


# 인증 게이트가 요청 컨텍스트에 붙이는 신원 정보
class Identity(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    username: str
    email: str


# 정규화된 페이지네이션 파라미터
class PaginationParams(BaseModel):
    page: int
    limit: int
    offset: int


# SQL BIGINT 상한 (OFFSET, PK 바인딩 값의 최대치)
MAX_SQL_INTEGER = 2**63 - 1
