# wonderland/services/gallery_service.py
"""
갤러리 이미지 목록/등록/삭제
"""

from typing import Dict, List, Optional, Tuple

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from wonderland.models import GalleryImage, row_to_dict
from wonderland.schemas.commons_schemas import PaginationParams
from wonderland.schemas.gallery_schemas import GalleryImageCreate
from .database_service import fetch_page


async def list_images(session: AsyncSession, pagination: PaginationParams,
                      category: Optional[str] = None) -> Tuple[List[Dict], int]:
    conditions = [GalleryImage.category == category] if category else []
    return await fetch_page(
        session, GalleryImage, conditions, [GalleryImage.created_at.desc(), GalleryImage.id.desc()],
        pagination.limit, pagination.offset,
    )


async def create_image(session: AsyncSession, image: GalleryImageCreate, image_url: str, user_id: int) -> Dict:
    record = GalleryImage(user_id=user_id, image_url=image_url, thumbnail_url=image_url, **image.model_dump())
    session.add(record)
    await session.commit()
    await session.refresh(record)
    return row_to_dict(record)


async def get_image(session: AsyncSession, image_id: int) -> Optional[Dict]:
    image = await session.get(GalleryImage, image_id)
    return row_to_dict(image) if image else None


async def delete_image(session: AsyncSession, image_id: int, user_id: int) -> bool:
    query = delete(GalleryImage).where(GalleryImage.id == image_id, GalleryImage.user_id == user_id)
    result = await session.execute(query)
    await session.commit()
    return result.rowcount > 0
