from sqlalchemy.orm import Session

from storefront.core.exceptions import HttpException
from storefront.core.security import hash_password, verify_password
from storefront.models import User
from storefront.schemas.user import UpdateProfileIn, UpdatePasswordIn


def update_profile(db: Session, user: User, data: UpdateProfileIn) -> User:
    for field, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(user, field, value)
    db.commit()
    db.refresh(user)
    return user


def update_password(db: Session, user: User, data: UpdatePasswordIn) -> User:
    if not verify_password(data.current_password, user.password):
        raise HttpException(403, "Current password is incorrect.")
    if data.new_password != data.new_password_confirm:
        raise HttpException(400, "New passwords do not match.")

    user.password = hash_password(data.new_password)
    db.commit()
    db.refresh(user)
    return user
