# wonderland/schemas/wish_schemas.py
from typing import Literal

from pydantic import BaseModel

WISH_CATEGORIES = ("nice", "naughty")
DEFAULT_WISH_CATEGORY = "nice"


class WishCreate(BaseModel):
    name: str
    content: str
    category: Literal["nice", "naughty"] = DEFAULT_WISH_CATEGORY
    is_anonymous: bool = False
