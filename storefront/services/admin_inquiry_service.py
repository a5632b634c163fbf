from datetime import date, datetime
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session, selectinload, joinedload

from storefront.core.exceptions import HttpException
from storefront.models import Inquiry, User
from storefront.models.enums import InquiryStatus, InquiryType
from storefront.schemas.inquiry import AnswerInquiryIn
from storefront.services.admin_order_service import date_range_filters
from storefront.utils.pagination import paginate


def get_all_inquiries(
    db: Session,
    page: int,
    limit: int,
    type: Optional[InquiryType] = None,
    status: Optional[InquiryStatus] = None,
    search: Optional[str] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> dict:
    query = db.query(Inquiry).options(joinedload(Inquiry.user), selectinload(Inquiry.images))

    if type:
        query = query.filter(Inquiry.type == type)
    if status:
        query = query.filter(Inquiry.status == status)
    if search:
        query = query.join(Inquiry.user).filter(
            or_(
                User.name.contains(search, autoescape=True),
                User.email.contains(search, autoescape=True),
                Inquiry.title.contains(search, autoescape=True),
            )
        )
    for f in date_range_filters(Inquiry.created_at, start_date, end_date):
        query = query.filter(f)

    query = query.order_by(Inquiry.created_at.desc(), Inquiry.id.desc())
    return paginate(query, page, limit)


def get_inquiry_detail(db: Session, inquiry_id: int) -> Inquiry:
    inquiry = (
        db.query(Inquiry)
        .options(joinedload(Inquiry.user), selectinload(Inquiry.images))
        .filter(Inquiry.id == inquiry_id)
        .first()
    )
    if inquiry is None:
        raise HttpException(404, "Inquiry not found.")
    return inquiry


def answer_inquiry(db: Session, inquiry_id: int, data: AnswerInquiryIn) -> Inquiry:
    inquiry = get_inquiry_detail(db, inquiry_id)
    inquiry.answer = data.answer
    inquiry.status = InquiryStatus.ANSWERED
    inquiry.answered_at = datetime.utcnow()
    db.commit()
    db.refresh(inquiry)
    return inquiry


def delete_inquiry(db: Session, inquiry_id: int) -> dict:
    inquiry = get_inquiry_detail(db, inquiry_id)
    db.delete(inquiry)
    db.commit()
    return {"message": "Inquiry deleted by an administrator.", "deleted_id": inquiry_id}
