import logging

from sqlalchemy.orm import Session

from storefront.core.exceptions import HttpException
from storefront.core.security import hash_password, verify_password, create_token
from storefront.models import User
from storefront.models.enums import Role
from storefront.schemas.user import RegisterIn, LoginIn

logger = logging.getLogger(__name__)


def email_taken(db: Session, email: str) -> bool:
    return db.query(User.id).filter(User.email == email).first() is not None


def register(db: Session, data: RegisterIn) -> User:
    if data.password != data.password_confirm:
        raise HttpException(400, "Passwords do not match.")
    if email_taken(db, data.email):
        raise HttpException(409, "This email is already registered.")

    user = User(
        email=data.email,
        password=hash_password(data.password),
        name=data.name,
        phone=data.phone,
        birthdate=data.birthdate,
        gender=data.gender,
        role=Role.USER,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info(f"User {user.id} registered")
    return user


def login(db: Session, data: LoginIn) -> dict:
    user = db.query(User).filter(User.email == data.email).first()
    # same answer for an unknown email and a wrong password
    if user is None or not verify_password(data.password, user.password):
        raise HttpException(405, "Invalid email or password.")

    token = create_token(str(user.id), extra={"role": user.role.value})
    return {"user": user, "token": token}
