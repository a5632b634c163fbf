from sqlalchemy.orm import Session

from storefront.core.exceptions import HttpException
from storefront.core.security import hash_password
from storefront.models import User
from storefront.schemas.user import AdminUserCreateIn, AdminUserUpdateIn
from storefront.services.auth_service import email_taken
from storefront.utils.pagination import paginate


def get_all_users(db: Session, page: int, limit: int) -> dict:
    query = db.query(User).order_by(User.created_at.desc(), User.id.desc())
    return paginate(query, page, limit)


def get_user_detail(db: Session, user_id: int) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise HttpException(404, "User not found.")
    return user


def create_user(db: Session, data: AdminUserCreateIn) -> User:
    if email_taken(db, data.email):
        raise HttpException(409, "This email is already registered.")

    values = data.model_dump()
    values["password"] = hash_password(data.password)
    user = User(**values)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def update_user(db: Session, user_id: int, data: AdminUserUpdateIn) -> User:
    user = get_user_detail(db, user_id)
    changes = data.model_dump(exclude_unset=True, exclude_none=True)

    if "email" in changes and changes["email"] != user.email and email_taken(db, changes["email"]):
        raise HttpException(409, "This email is already registered.")
    if "password" in changes:
        changes["password"] = hash_password(changes["password"])

    for field, value in changes.items():
        setattr(user, field, value)
    db.commit()
    db.refresh(user)
    return user
