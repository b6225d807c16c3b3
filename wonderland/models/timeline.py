# wonderland/models/timeline.py
"""
타임라인 이벤트 모델 (API에서는 읽기 전용)
"""

from sqlalchemy import Column, DateTime, Integer, String, Text
from .base import Base, utcnow

class TimelineEvent(Base):
    __tablename__ = "timeline_events"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    event_date = Column(String(50), nullable=False)  # 표시용 문자열
    meta = Column(String(255))
    description = Column(Text)
    sort_order = Column(Integer, default=0, nullable=False, index=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
