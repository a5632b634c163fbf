from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from storefront.db.session import get_db
from storefront.schemas.category import CategoryCreateIn, CategoryUpdateIn, CategoryOut
from storefront.schemas.common import MessageResponse, DeletedResponse
from storefront.services import admin_category_service

router = APIRouter()


@router.post("/", response_model=MessageResponse[CategoryOut], status_code=status.HTTP_201_CREATED)
def create_category(payload: CategoryCreateIn, db: Session = Depends(get_db)):
    category = admin_category_service.create_category(db, payload)
    return {"message": "Category created.", "data": category}


@router.patch("/{category_id}", response_model=MessageResponse[CategoryOut])
def update_category(payload: CategoryUpdateIn, category_id: int = Path(..., ge=1), db: Session = Depends(get_db)):
    category = admin_category_service.update_category(db, category_id, payload)
    return {"message": "Category updated.", "data": category}


@router.delete("/{category_id}", response_model=DeletedResponse)
def delete_category(category_id: int = Path(..., ge=1), db: Session = Depends(get_db)):
    return admin_category_service.delete_category(db, category_id)
