from pydantic import EmailStr, Field
from typing import Optional
from datetime import datetime
from storefront.models.enums import Gender, Role
from storefront.schemas.common import CamelModel

BIRTHDATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


class UserOut(CamelModel):
    id: int
    email: EmailStr
    name: str
    phone: str
    birthdate: str
    gender: Gender
    role: Role
    created_at: datetime
    updated_at: datetime


class RegisterIn(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=8)
    password_confirm: str = Field(..., min_length=8)
    name: str = Field(..., min_length=1)
    phone: str
    birthdate: str = Field(..., pattern=BIRTHDATE_PATTERN)
    gender: Gender


class LoginIn(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class LoginOut(CamelModel):
    user: UserOut
    token: str


class UpdateProfileIn(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    phone: Optional[str] = None
    birthdate: Optional[str] = Field(None, pattern=BIRTHDATE_PATTERN)
    gender: Optional[Gender] = None


class UpdatePasswordIn(CamelModel):
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=8)
    new_password_confirm: str = Field(..., min_length=8)


# --- admin ---

class AdminUserCreateIn(CamelModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=8)
    phone: str
    birthdate: str = Field(..., pattern=BIRTHDATE_PATTERN)
    gender: Gender
    role: Role = Role.USER


class AdminUserUpdateIn(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=8)
    phone: Optional[str] = None
    birthdate: Optional[str] = Field(None, pattern=BIRTHDATE_PATTERN)
    gender: Optional[Gender] = None
    role: Optional[Role] = None
