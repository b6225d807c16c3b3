# wonderland/services/todo_service.py
"""
할 일 CRUD - 모든 조회는 소유자 조건을 포함한다
"""

from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from wonderland.models import Todo, row_to_dict, utcnow
from wonderland.schemas.commons_schemas import PaginationParams
from wonderland.schemas.todo_schemas import TodoCreate
from .database_service import fetch_page


async def list_todos(session: AsyncSession, user_id: int, pagination: PaginationParams,
                     completed: Optional[bool] = None, priority: Optional[str] = None) -> Tuple[List[Dict], int]:
    conditions = [Todo.user_id == user_id]
    if completed is not None:
        conditions.append(Todo.completed == completed)
    if priority:
        conditions.append(Todo.priority == priority)
    return await fetch_page(
        session, Todo, conditions, [Todo.created_at.desc(), Todo.id.desc()],
        pagination.limit, pagination.offset,
    )


async def create_todo(session: AsyncSession, todo: TodoCreate, user_id: int) -> Dict:
    record = Todo(user_id=user_id, **todo.model_dump())
    session.add(record)
    await session.commit()
    await session.refresh(record)
    return row_to_dict(record)


async def get_todo(session: AsyncSession, todo_id: int) -> Optional[Dict]:
    todo = await session.get(Todo, todo_id, populate_existing=True)
    return row_to_dict(todo) if todo else None


async def update_todo(session: AsyncSession, todo_id: int, user_id: int, fields: Dict[str, Any]) -> Optional[Dict]:
    query = (
        update(Todo)
        .where(Todo.id == todo_id, Todo.user_id == user_id)
        .values(**fields, updated_at=utcnow())
    )
    await session.execute(query)
    await session.commit()
    return await get_todo(session, todo_id)


async def delete_todo(session: AsyncSession, todo_id: int, user_id: int) -> bool:
    result = await session.execute(delete(Todo).where(Todo.id == todo_id, Todo.user_id == user_id))
    await session.commit()
    return result.rowcount > 0


async def count_todos(session: AsyncSession) -> int:
    return (await session.execute(select(func.count()).select_from(Todo))).scalar_one()
