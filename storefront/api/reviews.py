from typing import Literal

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_user
from storefront.db.session import get_db
from storefront.models import User
from storefront.schemas.common import MessageResponse, Page, DeletedResponse
from storefront.schemas.review import ReviewCreateIn, ReviewUpdateIn, ReviewOut, ProductReviewOut, MyReviewOut
from storefront.services import review_service
from storefront.utils.pagination import PageParams, page_params

router = APIRouter()

ReviewSort = Literal["latest", "rating_desc", "rating_asc"]


@router.get("/product/{product_id}", response_model=Page[ProductReviewOut])
def get_product_reviews(
    product_id: int = Path(..., ge=1),
    sort: ReviewSort = Query("latest"),
    params: PageParams = Depends(page_params()),
    db: Session = Depends(get_db),
):
    return review_service.get_product_reviews(db, product_id, sort, params.page, params.limit)


@router.get("/me", response_model=Page[MyReviewOut])
def get_my_reviews(
    sort: ReviewSort = Query("latest"),
    params: PageParams = Depends(page_params()),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return review_service.get_my_reviews(db, user.id, sort, params.page, params.limit)


@router.post("/", response_model=MessageResponse[ReviewOut], status_code=status.HTTP_201_CREATED)
def create_review(payload: ReviewCreateIn, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    review = review_service.create_review(db, user.id, payload)
    return {"message": "Review created.", "data": review}


@router.put("/{review_id}", response_model=MessageResponse[ReviewOut])
def update_review(
    payload: ReviewUpdateIn,
    review_id: int = Path(..., ge=1),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    review = review_service.update_review(db, user.id, review_id, payload)
    return {"message": "Review updated.", "data": review}


@router.delete("/{review_id}", response_model=DeletedResponse)
def delete_review(review_id: int = Path(..., ge=1), user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return review_service.delete_review(db, user.id, review_id)
