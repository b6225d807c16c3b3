# wonderland/models/todo.py
"""
할 일 모델 - 소유자만 수정/삭제 가능
"""

from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy import Enum as SQLEnum
from .base import Base, utcnow

class Todo(Base):
    __tablename__ = "todos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    completed = Column(Boolean, default=False, nullable=False, index=True)
    priority = Column(SQLEnum("low", "medium", "high", name="todo_priority"), default="medium", nullable=False, index=True)
    due_date = Column(Date)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
