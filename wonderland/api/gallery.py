# wonderland/api/gallery.py
"""
갤러리 API - 목록(공개), 업로드/삭제(필수 인증, multipart)
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Path, Query, UploadFile
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from wonderland.api.deps import database_error, get_context, get_pagination, get_session, require_identity
from wonderland.context import AppContext
from wonderland.exceptions import AppError, NotFoundError
from wonderland.schemas.commons_schemas import MAX_SQL_INTEGER, Identity, PaginationParams
from wonderland.services import gallery_service
from wonderland.transformers import create_pagination_meta, inputs, outputs
from wonderland.utils.logger import logger

router = APIRouter(prefix="/gallery", tags=["gallery"])


@router.get("")
async def list_images(
    category: Optional[str] = Query(None),
    pagination: PaginationParams = Depends(get_pagination),
    session: AsyncSession = Depends(get_session),
):
    try:
        images, total = await gallery_service.list_images(
            session, pagination, category=inputs.gallery_category_filter(category)
        )
        meta = create_pagination_meta(pagination.page, pagination.limit, total)
        return outputs.paginated(images, meta, outputs.gallery_image)

    except SQLAlchemyError as e:
        raise database_error(e, "갤러리 조회") from e


@router.post("", status_code=201)
async def upload_image(
    image: Optional[UploadFile] = File(None),
    label: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    identity: Identity = Depends(require_identity),
    context: AppContext = Depends(get_context),
    session: AsyncSession = Depends(get_session),
):
    image_url = None
    try:
        metadata = inputs.gallery_image({"label": label, "description": description, "category": category})
        image_url = await context.uploads.save_image(image)

        logger.info(f" 이미지 업로드: user_id={identity.id}, url={image_url}")

        record = await gallery_service.create_image(session, metadata, image_url, identity.id)
        return outputs.success(outputs.gallery_image(record), "Image uploaded successfully")

    except AppError:
        raise
    except SQLAlchemyError as e:
        context.uploads.delete_image(image_url)
        raise database_error(e, "이미지 등록") from e


@router.delete("/{image_id}")
async def delete_image(
    image_id: int = Path(..., le=MAX_SQL_INTEGER),
    identity: Identity = Depends(require_identity),
    context: AppContext = Depends(get_context),
    session: AsyncSession = Depends(get_session),
):
    try:
        image = await gallery_service.get_image(session, image_id)
        if not image or image["user_id"] != identity.id:
            raise NotFoundError("Image not found")

        await gallery_service.delete_image(session, image_id, identity.id)
        context.uploads.delete_image(image["image_url"])

        logger.info(f"🗑️ 이미지 삭제 완료: image_id={image_id}")
        return outputs.success(message="Image deleted successfully")

    except AppError:
        raise
    except SQLAlchemyError as e:
        raise database_error(e, "이미지 삭제") from e
