# wonderland/schemas/todo_schemas.py
"""
할 일 입력 DTO

TodoPatch는 입력에 실제로 존재한 키만 설정되므로
model_dump(exclude_unset=True)로 부분 업데이트 집합을 얻는다.
"""

from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel

TODO_PRIORITIES = ("low", "medium", "high")
DEFAULT_TODO_PRIORITY = "medium"

Priority = Literal["low", "medium", "high"]


class TodoCreate(BaseModel):
    title: str
    description: Optional[str] = None
    priority: Priority = DEFAULT_TODO_PRIORITY
    due_date: Optional[date] = None
    completed: bool = False


class TodoPatch(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[Priority] = None
    due_date: Optional[date] = None
    completed: Optional[bool] = None
