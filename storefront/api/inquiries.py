from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_user
from storefront.db.session import get_db
from storefront.models import User
from storefront.models.enums import InquiryStatus, InquiryType
from storefront.schemas.common import DataResponse, MessageResponse, Page, DeletedResponse
from storefront.schemas.inquiry import InquiryCreateIn, InquiryUpdateIn, InquiryOut
from storefront.services import inquiry_service
from storefront.utils.pagination import PageParams, page_params

router = APIRouter()


@router.post("/", response_model=MessageResponse[InquiryOut], status_code=status.HTTP_201_CREATED)
def create_inquiry(payload: InquiryCreateIn, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    inquiry = inquiry_service.create_inquiry(db, user.id, payload)
    return {"message": "Inquiry submitted.", "data": inquiry}


@router.get("/", response_model=Page[InquiryOut])
def get_my_inquiries(
    type: Optional[InquiryType] = Query(None),
    status: Optional[InquiryStatus] = Query(None),
    params: PageParams = Depends(page_params()),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return inquiry_service.get_my_inquiries(db, user.id, params.page, params.limit, type, status)


@router.get("/{inquiry_id}", response_model=DataResponse[InquiryOut])
def get_inquiry_detail(inquiry_id: int = Path(..., ge=1), user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return {"data": inquiry_service.get_inquiry_detail(db, user.id, inquiry_id)}


@router.put("/{inquiry_id}", response_model=MessageResponse[InquiryOut])
def update_inquiry(
    payload: InquiryUpdateIn,
    inquiry_id: int = Path(..., ge=1),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    inquiry = inquiry_service.update_inquiry(db, user.id, inquiry_id, payload)
    return {"message": "Inquiry updated.", "data": inquiry}


@router.delete("/{inquiry_id}", response_model=DeletedResponse)
def delete_inquiry(inquiry_id: int = Path(..., ge=1), user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return inquiry_service.delete_inquiry(db, user.id, inquiry_id)
