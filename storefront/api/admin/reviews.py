from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session

from storefront.db.session import get_db
from storefront.schemas.common import Page, DeletedResponse
from storefront.schemas.review import AdminReviewOut
from storefront.services import admin_review_service
from storefront.utils.pagination import PageParams, page_params

router = APIRouter()


@router.get("/", response_model=Page[AdminReviewOut])
def get_all_reviews(
    search: Optional[str] = Query(None),
    product_id: Optional[int] = Query(None, alias="productId", ge=1),
    user_id: Optional[int] = Query(None, alias="userId", ge=1),
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    params: PageParams = Depends(page_params()),
    db: Session = Depends(get_db),
):
    return admin_review_service.get_all_reviews(
        db, params.page, params.limit, search, product_id, user_id, start_date, end_date
    )


@router.delete("/{review_id}", response_model=DeletedResponse)
def delete_review(review_id: int = Path(..., ge=1), db: Session = Depends(get_db)):
    return admin_review_service.delete_review(db, review_id)
