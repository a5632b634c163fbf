from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_user
from storefront.db.session import get_db
from storefront.models import User
from storefront.schemas.cart import AddToCartIn, UpdateCartItemIn, CartOut, CartItemOut
from storefront.schemas.common import DataResponse, MessageResponse, DeletedResponse
from storefront.services import cart_service

router = APIRouter()


@router.get("/", response_model=DataResponse[CartOut])
def get_my_cart(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return {"data": cart_service.get_my_cart(db, user.id)}


@router.post("/items", response_model=MessageResponse[CartItemOut], status_code=status.HTTP_201_CREATED)
def add_item(payload: AddToCartIn, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    item = cart_service.add_item(db, user.id, payload)
    return {"message": "Added to cart.", "data": item}


@router.patch("/items/{item_id}", response_model=MessageResponse[CartItemOut])
def update_item(
    payload: UpdateCartItemIn,
    item_id: int = Path(..., ge=1),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    item = cart_service.update_item(db, user.id, item_id, payload)
    return {"message": "Cart item updated.", "data": item}


@router.delete("/items/{item_id}", response_model=DeletedResponse)
def delete_item(item_id: int = Path(..., ge=1), user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return cart_service.delete_item(db, user.id, item_id)
