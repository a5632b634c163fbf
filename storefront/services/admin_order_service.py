import logging
from datetime import date, datetime, time
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session, selectinload, joinedload

from storefront.core.exceptions import HttpException
from storefront.models import Order, User
from storefront.models.enums import OrderStatus, PaymentStatus
from storefront.schemas.order import UpdateOrderStatusIn
from storefront.services.order_service import refund_payment, set_status_if
from storefront.services.order_status import can_transition
from storefront.services.payment_gateway import PaymentGateway
from storefront.utils.pagination import paginate

logger = logging.getLogger(__name__)


def date_range_filters(column, start_date: Optional[date], end_date: Optional[date]) -> list:
    filters = []
    if start_date:
        filters.append(column >= datetime.combine(start_date, time.min))
    if end_date:
        filters.append(column <= datetime.combine(end_date, time.max))
    return filters


def get_all_orders(
    db: Session,
    page: int,
    limit: int,
    status: Optional[OrderStatus] = None,
    search: Optional[str] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> dict:
    query = db.query(Order).options(
        joinedload(Order.user), selectinload(Order.items), selectinload(Order.payment)
    )

    if status:
        query = query.filter(Order.status == status)
    if search:
        # orderer name / email or recipient name
        query = query.join(Order.user).filter(
            or_(
                User.name.contains(search, autoescape=True),
                User.email.contains(search, autoescape=True),
                Order.recipient_name.contains(search, autoescape=True),
            )
        )
    for f in date_range_filters(Order.created_at, start_date, end_date):
        query = query.filter(f)

    query = query.order_by(Order.created_at.desc(), Order.id.desc())
    return paginate(query, page, limit)


def get_order_detail(db: Session, order_id: int) -> Order:
    order = (
        db.query(Order)
        .options(joinedload(Order.user), selectinload(Order.items), selectinload(Order.payment))
        .filter(Order.id == order_id)
        .first()
    )
    if order is None:
        raise HttpException(404, "Order not found.")
    return order


def update_order_status(db: Session, gateway: PaymentGateway, order_id: int, data: UpdateOrderStatusIn) -> Order:
    order = get_order_detail(db, order_id)
    previous = order.status

    if data.status != previous and not can_transition(previous, data.status):
        if not data.force:
            raise HttpException(
                400,
                f"Cannot change order status from {previous.value} to {data.status.value}.",
            )
        logger.warning(f"Forced status change on order {order.id}: {previous.value} -> {data.status.value}")

    values = {Order.status: data.status}
    # omitted tracking fields keep their current value
    if data.tracking_number:
        values[Order.tracking_number] = data.tracking_number
    if data.carrier:
        values[Order.carrier] = data.carrier

    try:
        if not set_status_if(db, order.id, previous, values):
            raise HttpException(400, "This order has already been processed.")
        payment = order.payment
        if data.status == OrderStatus.CANCELED and payment is not None and payment.status == PaymentStatus.PAID:
            refund_payment(gateway, order, "Canceled by administrator")
        db.commit()
    except Exception:
        db.rollback()
        raise

    return get_order_detail(db, order.id)
