# wonderland/api/todos.py
"""
할 일 API (필수 인증)

수정/삭제 전 소유권 확인: 레코드가 없거나 소유자가 다르면
존재 여부를 노출하지 않도록 동일하게 404로 응답한다.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Path, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from wonderland.api.deps import database_error, get_pagination, get_session, require_identity
from wonderland.exceptions import AppError, NotFoundError, ValidationError
from wonderland.schemas.commons_schemas import MAX_SQL_INTEGER, Identity, PaginationParams
from wonderland.schemas.todo_schemas import TODO_PRIORITIES
from wonderland.services import stats_service, todo_service
from wonderland.transformers import create_pagination_meta, inputs, outputs, validators
from wonderland.utils.logger import logger

router = APIRouter(prefix="/todos", tags=["todos"])


async def _get_owned_todo(session: AsyncSession, todo_id: int, identity: Identity) -> Dict[str, Any]:
    todo = await todo_service.get_todo(session, todo_id)
    if not todo or todo["user_id"] != identity.id:
        raise NotFoundError("Todo not found")
    return todo


@router.get("")
async def list_todos(
    completed: Optional[str] = Query(None),
    priority: Optional[str] = Query(None),
    identity: Identity = Depends(require_identity),
    pagination: PaginationParams = Depends(get_pagination),
    session: AsyncSession = Depends(get_session),
):
    try:
        todos, total = await todo_service.list_todos(
            session,
            identity.id,
            pagination,
            completed=inputs.completed_filter(completed),
            priority=inputs.todo_priority_filter(priority),
        )
        meta = create_pagination_meta(pagination.page, pagination.limit, total)
        return outputs.paginated(todos, meta, outputs.todo)

    except SQLAlchemyError as e:
        raise database_error(e, "할 일 목록 조회") from e


@router.post("", status_code=201)
async def create_todo(
    body: Dict[str, Any] = Body(...),
    identity: Identity = Depends(require_identity),
    session: AsyncSession = Depends(get_session),
):
    try:
        if body.get("priority"):
            validators.assert_enum(body["priority"], TODO_PRIORITIES, "priority")
        todo = inputs.todo(body)
        validators.required(todo.title, "title")

        logger.info(f" 할 일 등록 요청: user_id={identity.id}")

        record = await todo_service.create_todo(session, todo, identity.id)
        await stats_service.increment(session, "todos_count")

        return outputs.success(outputs.todo(record), "Todo created successfully")

    except AppError:
        raise
    except SQLAlchemyError as e:
        raise database_error(e, "할 일 등록") from e


@router.patch("/{todo_id}")
async def update_todo(
    todo_id: int = Path(..., le=MAX_SQL_INTEGER),
    body: Dict[str, Any] = Body(...),
    identity: Identity = Depends(require_identity),
    session: AsyncSession = Depends(get_session),
):
    try:
        await _get_owned_todo(session, todo_id, identity)

        if "priority" in body:
            validators.assert_enum(body["priority"], TODO_PRIORITIES, "priority")
        fields = inputs.todo_patch(body).model_dump(exclude_unset=True)
        if "title" in fields:
            validators.required(fields["title"], "title")
        if not fields:
            raise ValidationError("No fields to update")

        logger.info(f" 할 일 수정 요청: todo_id={todo_id}, fields={sorted(fields)}")

        record = await todo_service.update_todo(session, todo_id, identity.id, fields)
        if not record:
            raise NotFoundError("Todo not found")
        return outputs.success(outputs.todo(record), "Todo updated successfully")

    except AppError:
        raise
    except SQLAlchemyError as e:
        raise database_error(e, "할 일 수정") from e


@router.delete("/{todo_id}")
async def delete_todo(
    todo_id: int = Path(..., le=MAX_SQL_INTEGER),
    identity: Identity = Depends(require_identity),
    session: AsyncSession = Depends(get_session),
):
    try:
        await _get_owned_todo(session, todo_id, identity)
        await todo_service.delete_todo(session, todo_id, identity.id)

        logger.info(f"🗑️ 할 일 삭제 완료: todo_id={todo_id}")
        return outputs.success(message="Todo deleted successfully")

    except AppError:
        raise
    except SQLAlchemyError as e:
        raise database_error(e, "할 일 삭제") from e
