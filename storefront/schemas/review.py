from pydantic import Field
from typing import List, Optional
from datetime import datetime
from storefront.schemas.common import CamelModel, ImageOut


class ReviewUserOut(CamelModel):
    name: str


class ReviewProductOut(CamelModel):
    id: int
    name: str


class ReviewOut(CamelModel):
    id: int
    user_id: int
    product_id: int
    rating: int
    content: str
    created_at: datetime
    updated_at: datetime
    images: List[ImageOut] = []


class ProductReviewOut(ReviewOut):
    user: ReviewUserOut


class MyReviewOut(ReviewOut):
    product: ReviewProductOut


class AdminReviewUserOut(CamelModel):
    id: int
    name: str
    email: str


class AdminReviewOut(ReviewOut):
    user: AdminReviewUserOut
    product: ReviewProductOut


class ReviewCreateIn(CamelModel):
    product_id: int = Field(..., ge=1)
    rating: int = Field(..., ge=1, le=5)
    content: str = Field(..., min_length=10)
    image_urls: Optional[List[str]] = None


class ReviewUpdateIn(CamelModel):
    rating: Optional[int] = Field(None, ge=1, le=5)
    content: Optional[str] = Field(None, min_length=10)
    image_urls: Optional[List[str]] = None
