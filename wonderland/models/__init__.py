# wonderland/models/__init__.py
"""
Models 패키지
SQLAlchemy 모델과 공통 유틸
"""

from .base import Base, row_to_dict, utcnow
from .user import User
from .wish import Wish
from .todo import Todo
from .timeline import TimelineEvent
from .gallery import GalleryImage
from .music import Song
from .statistics import SiteStat

__all__ = [
    "Base",
    "row_to_dict",
    "utcnow",
    "User",
    "Wish",
    "Todo",
    "TimelineEvent",
    "GalleryImage",
    "Song",
    "SiteStat",
]
