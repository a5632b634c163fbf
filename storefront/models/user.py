from sqlalchemy import Column, Integer, String, DateTime, Enum
from storefront.db.session import Base
from storefront.models.enums import Role, Gender
from datetime import datetime


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)
    name = Column(String(100), nullable=False)
    phone = Column(String(30), nullable=False)
    birthdate = Column(String(10), nullable=False)
    gender = Column(Enum(Gender, native_enum=False), nullable=False)
    role = Column(Enum(Role, native_enum=False), nullable=False, default=Role.USER)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
