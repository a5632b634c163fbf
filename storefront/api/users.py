from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_user
from storefront.db.session import get_db
from storefront.models import User
from storefront.schemas.common import DataResponse, MessageResponse
from storefront.schemas.user import UserOut, UpdateProfileIn, UpdatePasswordIn
from storefront.services import user_service

router = APIRouter()


@router.get("/me", response_model=DataResponse[UserOut])
def get_me(user: User = Depends(get_current_user)):
    return {"data": user}


@router.patch("/me", response_model=MessageResponse[UserOut])
def update_me(payload: UpdateProfileIn, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    user = user_service.update_profile(db, user, payload)
    return {"message": "Profile updated.", "data": user}


@router.patch("/me/password", response_model=MessageResponse[UserOut])
def update_password(payload: UpdatePasswordIn, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    user = user_service.update_password(db, user, payload)
    return {"message": "Password changed.", "data": user}
