from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session

from storefront.db.session import get_db
from storefront.models.enums import InquiryStatus, InquiryType
from storefront.schemas.common import DataResponse, MessageResponse, Page, DeletedResponse
from storefront.schemas.inquiry import AdminInquiryOut, AnswerInquiryIn
from storefront.services import admin_inquiry_service
from storefront.utils.pagination import PageParams, page_params

router = APIRouter()


@router.get("/", response_model=Page[AdminInquiryOut])
def get_all_inquiries(
    type: Optional[InquiryType] = Query(None),
    status: Optional[InquiryStatus] = Query(None),
    search: Optional[str] = Query(None),
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    params: PageParams = Depends(page_params()),
    db: Session = Depends(get_db),
):
    return admin_inquiry_service.get_all_inquiries(
        db, params.page, params.limit, type, status, search, start_date, end_date
    )


@router.get("/{inquiry_id}", response_model=DataResponse[AdminInquiryOut])
def get_inquiry_detail(inquiry_id: int = Path(..., ge=1), db: Session = Depends(get_db)):
    return {"data": admin_inquiry_service.get_inquiry_detail(db, inquiry_id)}


@router.patch("/{inquiry_id}/answer", response_model=MessageResponse[AdminInquiryOut])
def answer_inquiry(payload: AnswerInquiryIn, inquiry_id: int = Path(..., ge=1), db: Session = Depends(get_db)):
    inquiry = admin_inquiry_service.answer_inquiry(db, inquiry_id, payload)
    return {"message": "Answer saved.", "data": inquiry}


@router.delete("/{inquiry_id}", response_model=DeletedResponse)
def delete_inquiry(inquiry_id: int = Path(..., ge=1), db: Session = Depends(get_db)):
    return admin_inquiry_service.delete_inquiry(db, inquiry_id)
