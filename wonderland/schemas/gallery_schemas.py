# wonderland/schemas/gallery_schemas.py
from typing import Optional

from pydantic import BaseModel

DEFAULT_GALLERY_CATEGORY = "general"


class GalleryImageCreate(BaseModel):
    label: Optional[str] = None
    description: Optional[str] = None
    category: str = DEFAULT_GALLERY_CATEGORY
