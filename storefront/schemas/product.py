from pydantic import Field
from typing import List, Optional
from datetime import datetime
from storefront.schemas.common import CamelModel, ImageOut


class ProductCategoryOut(CamelModel):
    id: int
    name: str
    path: str


class ProductSummaryOut(CamelModel):
    id: int
    name: str
    price: int
    summary: str
    category_id: int
    created_at: datetime
    images: List[ImageOut] = []


class ProductOut(CamelModel):
    id: int
    name: str
    price: int
    material: str
    summary: str
    collection: str
    lens: str
    origin_country: str
    shape: str
    size_info: str
    category_id: int
    category: Optional[ProductCategoryOut] = None
    images: List[ImageOut] = []
    created_at: datetime
    updated_at: datetime


class ProductCreateIn(CamelModel):
    name: str = Field(..., min_length=1)
    price: int = Field(..., ge=0)
    material: str = Field(..., min_length=1)
    summary: str = Field(..., min_length=1)
    collection: str = Field(..., min_length=1)
    lens: str = Field(..., min_length=1)
    origin_country: str = Field(..., min_length=1)
    shape: str = Field(..., min_length=1)
    size_info: str = Field(..., min_length=1)
    category_id: int = Field(..., ge=1)
    image_urls: List[str] = Field(..., min_length=1)


class ProductUpdateIn(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    price: Optional[int] = Field(None, ge=0)
    material: Optional[str] = Field(None, min_length=1)
    summary: Optional[str] = Field(None, min_length=1)
    collection: Optional[str] = Field(None, min_length=1)
    lens: Optional[str] = Field(None, min_length=1)
    origin_country: Optional[str] = Field(None, min_length=1)
    shape: Optional[str] = Field(None, min_length=1)
    size_info: Optional[str] = Field(None, min_length=1)
    category_id: Optional[int] = Field(None, ge=1)
    image_urls: Optional[List[str]] = Field(None, min_length=1)
