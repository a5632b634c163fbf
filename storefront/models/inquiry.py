from sqlalchemy import Column, Integer, Text, String, DateTime, Enum, ForeignKey
from sqlalchemy.orm import relationship
from storefront.db.session import Base
from storefront.models.enums import InquiryType, InquiryStatus
from datetime import datetime


class Inquiry(Base):
    __tablename__ = "inquiries"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    type = Column(Enum(InquiryType, native_enum=False), nullable=False)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)
    status = Column(Enum(InquiryStatus, native_enum=False), nullable=False, default=InquiryStatus.PENDING)
    answer = Column(Text, nullable=True)
    answered_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = relationship("User")
    images = relationship(
        "InquiryImage",
        back_populates="inquiry",
        cascade="all, delete-orphan",
        order_by="InquiryImage.id",
    )


class InquiryImage(Base):
    __tablename__ = "inquiry_images"

    id = Column(Integer, primary_key=True, index=True)
    url = Column(String(1000), nullable=False)
    inquiry_id = Column(Integer, ForeignKey("inquiries.id", ondelete="CASCADE"), nullable=False, index=True)

    inquiry = relationship("Inquiry", back_populates="images")
