from pydantic import Field
from typing import List
from datetime import datetime
from storefront.schemas.common import CamelModel, ImageOut


class BookmarkProductOut(CamelModel):
    id: int
    name: str
    price: int
    summary: str
    images: List[ImageOut] = []


class BookmarkOut(CamelModel):
    id: int
    user_id: int
    product_id: int
    created_at: datetime


class BookmarkListItemOut(BookmarkOut):
    product: BookmarkProductOut


class BookmarkCreateIn(CamelModel):
    product_id: int = Field(..., ge=1)


class BookmarkRemovedOut(CamelModel):
    message: str
    product_id: int
