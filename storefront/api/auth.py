from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from storefront.db.session import get_db
from storefront.schemas.common import MessageResponse
from storefront.schemas.user import RegisterIn, LoginIn, LoginOut, UserOut
from storefront.services import auth_service

router = APIRouter()


@router.post("/register", response_model=MessageResponse[UserOut], status_code=status.HTTP_201_CREATED)
def register(payload: RegisterIn, db: Session = Depends(get_db)):
    user = auth_service.register(db, payload)
    return {"message": "Registration complete.", "data": user}


@router.post("/login", response_model=MessageResponse[LoginOut])
def login(payload: LoginIn, db: Session = Depends(get_db)):
    return {"message": "Login successful.", "data": auth_service.login(db, payload)}
