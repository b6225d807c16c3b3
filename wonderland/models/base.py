# wonderland/models/base.py
"""
SQLAlchemy Base 설정 및 공통 유틸

엔진/세션은 DatabaseService가 앱 컨텍스트 단위로 소유한다.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from sqlalchemy.orm import declarative_base

# Base 모델
Base = declarative_base()


def utcnow() -> datetime:
    """DB 저장용 naive UTC 시각"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def row_to_dict(instance: Any) -> Dict[str, Any]:
    """ORM 인스턴스를 컬럼명 기준 dict로 변환"""
    return {column.name: getattr(instance, column.key) for column in instance.__table__.columns}
