from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from storefront.db.session import get_db
from storefront.schemas.common import DataResponse, MessageResponse, Page
from storefront.schemas.user import UserOut, AdminUserCreateIn, AdminUserUpdateIn
from storefront.services import admin_user_service
from storefront.utils.pagination import PageParams, page_params

router = APIRouter()


@router.get("/", response_model=Page[UserOut])
def get_all_users(params: PageParams = Depends(page_params()), db: Session = Depends(get_db)):
    return admin_user_service.get_all_users(db, params.page, params.limit)


@router.get("/{user_id}", response_model=DataResponse[UserOut])
def get_user_detail(user_id: int = Path(..., ge=1), db: Session = Depends(get_db)):
    return {"data": admin_user_service.get_user_detail(db, user_id)}


@router.post("/", response_model=MessageResponse[UserOut], status_code=status.HTTP_201_CREATED)
def create_user(payload: AdminUserCreateIn, db: Session = Depends(get_db)):
    user = admin_user_service.create_user(db, payload)
    return {"message": "User created.", "data": user}


@router.patch("/{user_id}", response_model=MessageResponse[UserOut])
def update_user(payload: AdminUserUpdateIn, user_id: int = Path(..., ge=1), db: Session = Depends(get_db)):
    user = admin_user_service.update_user(db, user_id, payload)
    return {"message": "User updated.", "data": user}
