# wonderland/models/wish.py
"""
소원 모델 - 생성 후 변경 불가 (익명 작성 허용)
"""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy import Enum as SQLEnum
from .base import Base, utcnow

class Wish(Base):
    __tablename__ = "wishes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    name = Column(String(100), nullable=False)
    content = Column(Text, nullable=False)
    category = Column(SQLEnum("nice", "naughty", name="wish_category"), default="nice", nullable=False, index=True)
    is_anonymous = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)
