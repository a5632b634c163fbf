from typing import Optional

from sqlalchemy.orm import Session, selectinload

from storefront.core.exceptions import HttpException
from storefront.models import Inquiry, InquiryImage
from storefront.models.enums import InquiryStatus, InquiryType
from storefront.schemas.inquiry import InquiryCreateIn, InquiryUpdateIn
from storefront.utils.pagination import paginate

INQUIRY_NOT_FOUND = "Inquiry not found."


def create_inquiry(db: Session, user_id: int, data: InquiryCreateIn) -> Inquiry:
    inquiry = Inquiry(
        user_id=user_id,
        type=data.type,
        title=data.title,
        content=data.content,
        status=InquiryStatus.PENDING,
        images=[InquiryImage(url=url) for url in data.image_urls or []],
    )
    try:
        db.add(inquiry)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(inquiry)
    return inquiry


def get_my_inquiries(
    db: Session,
    user_id: int,
    page: int,
    limit: int,
    type: Optional[InquiryType] = None,
    status: Optional[InquiryStatus] = None,
) -> dict:
    query = db.query(Inquiry).options(selectinload(Inquiry.images)).filter(Inquiry.user_id == user_id)
    if type:
        query = query.filter(Inquiry.type == type)
    if status:
        query = query.filter(Inquiry.status == status)
    query = query.order_by(Inquiry.created_at.desc(), Inquiry.id.desc())
    return paginate(query, page, limit)


def get_inquiry_detail(db: Session, user_id: int, inquiry_id: int) -> Inquiry:
    inquiry = db.get(Inquiry, inquiry_id)
    if inquiry is None or inquiry.user_id != user_id:
        raise HttpException(404, INQUIRY_NOT_FOUND)
    return inquiry


def _get_editable(db: Session, user_id: int, inquiry_id: int, action: str) -> Inquiry:
    inquiry = get_inquiry_detail(db, user_id, inquiry_id)
    if inquiry.status == InquiryStatus.ANSWERED:
        raise HttpException(403, f"Answered inquiries cannot be {action}.")
    return inquiry


def update_inquiry(db: Session, user_id: int, inquiry_id: int, data: InquiryUpdateIn) -> Inquiry:
    inquiry = _get_editable(db, user_id, inquiry_id, "edited")

    try:
        if data.image_urls is not None:
            inquiry.images = [InquiryImage(url=url) for url in data.image_urls]
        if data.type is not None:
            inquiry.type = data.type
        if data.title is not None:
            inquiry.title = data.title
        if data.content is not None:
            inquiry.content = data.content
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(inquiry)
    return inquiry


def delete_inquiry(db: Session, user_id: int, inquiry_id: int) -> dict:
    inquiry = _get_editable(db, user_id, inquiry_id, "deleted")
    db.delete(inquiry)
    db.commit()
    return {"message": "Inquiry deleted.", "deleted_id": inquiry_id}
