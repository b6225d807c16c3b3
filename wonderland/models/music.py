# wonderland/models/music.py
"""
플레이리스트 모델
"""

from sqlalchemy import Column, DateTime, Integer, String
from .base import Base, utcnow

class Song(Base):
    __tablename__ = "music_playlist"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    artist = Column(String(255))
    tag = Column(String(100))
    url = Column(String(500))
    duration = Column(Integer)  # 초 단위
    play_count = Column(Integer, default=0, nullable=False, index=True)
    sort_order = Column(Integer, default=0, nullable=False, index=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
