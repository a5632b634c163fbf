from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from storefront.db.session import get_db
from storefront.schemas.common import MessageResponse, DeletedResponse
from storefront.schemas.product import ProductCreateIn, ProductUpdateIn, ProductOut
from storefront.services import admin_product_service

router = APIRouter()


@router.post("/", response_model=MessageResponse[ProductOut], status_code=status.HTTP_201_CREATED)
def create_product(payload: ProductCreateIn, db: Session = Depends(get_db)):
    product = admin_product_service.create_product(db, payload)
    return {"message": "Product created.", "data": product}


@router.patch("/{product_id}", response_model=MessageResponse[ProductOut])
def update_product(payload: ProductUpdateIn, product_id: int = Path(..., ge=1), db: Session = Depends(get_db)):
    product = admin_product_service.update_product(db, product_id, payload)
    return {"message": "Product updated.", "data": product}


@router.delete("/{product_id}", response_model=DeletedResponse)
def delete_product(product_id: int = Path(..., ge=1), db: Session = Depends(get_db)):
    return admin_product_service.delete_product(db, product_id)
