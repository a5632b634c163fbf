from typing import Literal, Optional

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session

from storefront.db.session import get_db
from storefront.schemas.common import DataResponse, Page
from storefront.schemas.product import ProductOut, ProductSummaryOut
from storefront.services import product_service
from storefront.utils.pagination import PageParams, page_params

router = APIRouter()

ProductSort = Literal["latest", "oldest", "price_asc", "price_desc"]


@router.get("/", response_model=Page[ProductSummaryOut])
def list_products(
    category: Optional[str] = Query(None, description="Category path; includes subcategories"),
    keyword: Optional[str] = Query(None),
    sort: ProductSort = Query("latest"),
    params: PageParams = Depends(page_params()),
    db: Session = Depends(get_db),
):
    return product_service.list_products(db, params.page, params.limit, category, keyword, sort)


@router.get("/{product_id}", response_model=DataResponse[ProductOut])
def get_product(product_id: int = Path(..., ge=1), db: Session = Depends(get_db)):
    return {"data": product_service.get_product_by_id(db, product_id)}
