from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session

from storefront.db.session import get_db
from storefront.models.enums import OrderStatus
from storefront.schemas.common import DataResponse, MessageResponse, Page
from storefront.schemas.order import AdminOrderOut, UpdateOrderStatusIn
from storefront.services import admin_order_service
from storefront.services.payment_gateway import PaymentGateway, get_payment_gateway
from storefront.utils.pagination import PageParams, page_params

router = APIRouter()


@router.get("/", response_model=Page[AdminOrderOut])
def get_all_orders(
    status: Optional[OrderStatus] = Query(None),
    search: Optional[str] = Query(None),
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    params: PageParams = Depends(page_params(default_limit=20)),
    db: Session = Depends(get_db),
):
    return admin_order_service.get_all_orders(
        db, params.page, params.limit, status, search, start_date, end_date
    )


@router.get("/{order_id}", response_model=DataResponse[AdminOrderOut])
def get_order_detail(order_id: int = Path(..., ge=1), db: Session = Depends(get_db)):
    return {"data": admin_order_service.get_order_detail(db, order_id)}


@router.patch("/{order_id}/status", response_model=MessageResponse[AdminOrderOut])
def update_order_status(
    payload: UpdateOrderStatusIn,
    order_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
    gateway: PaymentGateway = Depends(get_payment_gateway),
):
    order = admin_order_service.update_order_status(db, gateway, order_id, payload)
    return {"message": "Order status updated.", "data": order}
