# wonderland/models/gallery.py
"""
갤러리 이미지 모델
"""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from .base import Base, utcnow

class GalleryImage(Base):
    __tablename__ = "gallery_images"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    image_url = Column(String(500), nullable=False)
    thumbnail_url = Column(String(500))
    label = Column(String(100))
    description = Column(Text)
    category = Column(String(50), default="general", nullable=False, index=True)
    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)
