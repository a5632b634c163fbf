from pydantic import Field
from typing import List, Optional
from datetime import datetime
from storefront.models.enums import InquiryType, InquiryStatus
from storefront.schemas.common import CamelModel, ImageOut


class InquiryOut(CamelModel):
    id: int
    user_id: int
    type: InquiryType
    title: str
    content: str
    status: InquiryStatus
    answer: Optional[str] = None
    answered_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    images: List[ImageOut] = []


class InquiryUserOut(CamelModel):
    id: int
    name: str
    email: str
    phone: str


class AdminInquiryOut(InquiryOut):
    user: InquiryUserOut


class InquiryCreateIn(CamelModel):
    type: InquiryType
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=10)
    image_urls: Optional[List[str]] = None


class InquiryUpdateIn(CamelModel):
    type: Optional[InquiryType] = None
    title: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = Field(None, min_length=10)
    image_urls: Optional[List[str]] = None


class AnswerInquiryIn(CamelModel):
    answer: str = Field(..., min_length=1)
