from __future__ import annotations

from pydantic import Field
from typing import List, Optional
from datetime import datetime
from storefront.schemas.common import CamelModel, PaginationMeta
from storefront.schemas.product import ProductSummaryOut


class CategoryOut(CamelModel):
    id: int
    name: str
    path: str
    parent_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime


class CategoryRef(CamelModel):
    id: int
    name: str
    path: str


class CategoryNode(CamelModel):
    id: int
    name: str
    path: str
    parent_id: Optional[int] = None
    children: List[CategoryNode] = []


class CategoryPageOut(CamelModel):
    category: CategoryOut
    breadcrumb: List[CategoryRef]
    products: List[ProductSummaryOut]
    pagination: PaginationMeta


class CategoryCreateIn(CamelModel):
    name: str = Field(..., min_length=1)
    path: str = Field(..., min_length=1, pattern=r"^[a-z0-9][a-z0-9_-]*$")
    parent_id: Optional[int] = Field(None, ge=1)


class CategoryUpdateIn(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    path: Optional[str] = Field(None, min_length=1, pattern=r"^[a-z0-9][a-z0-9_-]*$")
    parent_id: Optional[int] = Field(None, ge=1)
