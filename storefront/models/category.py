from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from storefront.db.session import Base
from datetime import datetime


class Category(Base):
    """A node of the category tree.

    Only the parent reference is stored; children are looked up on demand
    so the tree never holds live pointers in both directions.
    """
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    path = Column(String(100), unique=True, index=True, nullable=False)
    parent_id = Column(Integer, ForeignKey("categories.id"), nullable=True, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
