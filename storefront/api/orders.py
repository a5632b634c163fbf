from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_user
from storefront.db.session import get_db
from storefront.models import User
from storefront.schemas.common import DataResponse, MessageResponse, Page
from storefront.schemas.order import CreateOrderIn, ConfirmOrderIn, ReturnOrderIn, OrderOut
from storefront.services import order_service
from storefront.services.payment_gateway import PaymentGateway, get_payment_gateway
from storefront.utils.pagination import PageParams, page_params

router = APIRouter()


@router.post("/checkout", response_model=MessageResponse[OrderOut], status_code=status.HTTP_201_CREATED)
def checkout(payload: CreateOrderIn, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    order = order_service.create_order(db, user.id, payload)
    return {"message": "Order created.", "data": order}


@router.post("/confirm", response_model=MessageResponse[OrderOut])
def confirm(
    payload: ConfirmOrderIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    gateway: PaymentGateway = Depends(get_payment_gateway),
):
    order = order_service.confirm_order(db, gateway, user.id, payload)
    return {"message": "Payment confirmed.", "data": order}


@router.get("/", response_model=Page[OrderOut])
def get_my_orders(
    params: PageParams = Depends(page_params()),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return order_service.get_my_orders(db, user.id, params.page, params.limit)


@router.get("/{order_id}", response_model=DataResponse[OrderOut])
def get_order_detail(order_id: int = Path(..., ge=1), user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return {"data": order_service.get_order_detail(db, user.id, order_id)}


@router.post("/{order_id}/cancel", response_model=MessageResponse[OrderOut])
def cancel_order(
    order_id: int = Path(..., ge=1),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    gateway: PaymentGateway = Depends(get_payment_gateway),
):
    order = order_service.cancel_order(db, gateway, user.id, order_id)
    return {"message": "Order canceled.", "data": order}


@router.post("/{order_id}/return", response_model=MessageResponse[OrderOut])
def request_return(
    payload: ReturnOrderIn,
    order_id: int = Path(..., ge=1),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    order = order_service.request_return(db, user.id, order_id, payload)
    return {"message": "Return requested.", "data": order}
