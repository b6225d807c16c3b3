# wonderland/models/statistics.py
"""
일일 통계 모델 - 날짜당 한 행, upsert로 카운터 증가
"""

from sqlalchemy import Column, Date, DateTime, Integer
from .base import Base, utcnow

class SiteStat(Base):
    __tablename__ = "site_stats"

    id = Column(Integer, primary_key=True, autoincrement=True)
    stat_date = Column(Date, unique=True, nullable=False, index=True)
    visit_count = Column(Integer, default=0, nullable=False)
    active_users = Column(Integer, default=0, nullable=False)
    wishes_count = Column(Integer, default=0, nullable=False)
    todos_count = Column(Integer, default=0, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
