"""Checkout, payment confirmation, cancellation and returns for a customer.

Every status change is written with a conditional UPDATE (``WHERE status =
<status we checked>``) inside the same transaction as its side effects, so
two requests racing on one order cannot both succeed.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from storefront.core.exceptions import HttpException
from storefront.models import Order, OrderItem, Payment, Product
from storefront.models.enums import OrderStatus, PaymentStatus
from storefront.schemas.order import CreateOrderIn, ConfirmOrderIn, ReturnOrderIn
from storefront.services.order_status import can_transition
from storefront.services.payment_gateway import PaymentGateway, PaymentGatewayError
from storefront.utils.pagination import paginate

logger = logging.getLogger(__name__)

ORDER_NOT_FOUND = "Order not found."
ALREADY_PROCESSED = "This order has already been processed."


def _parse_approved_at(value: Optional[str]) -> datetime:
    if not value:
        return datetime.utcnow()
    try:
        approved = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        logger.warning(f"Unparseable approvedAt from gateway: {value!r}")
        return datetime.utcnow()
    if approved.tzinfo is not None:
        approved = approved.astimezone(timezone.utc).replace(tzinfo=None)
    return approved


def set_status_if(db: Session, order_id: int, expected: OrderStatus, values: dict) -> bool:
    values = {**values, Order.updated_at: datetime.utcnow()}
    updated = (
        db.query(Order)
        .filter(Order.id == order_id, Order.status == expected)
        .update(values, synchronize_session=False)
    )
    return updated == 1


def refund_payment(gateway: PaymentGateway, order: Order, reason: str):
    """Cancel the order's captured payment at the gateway and mark it CANCELED.

    Runs inside the caller's open transaction, after the order row has been
    moved to CANCELED; a failed refund raises 500 so the caller rolls back.
    """
    payment = order.payment
    try:
        gateway.cancel(payment.payment_key, reason)
    except PaymentGatewayError as e:
        logger.error(f"Payment cancel failed for order {order.id}: {e}")
        raise HttpException(500, "An error occurred while canceling the payment.")
    payment.status = PaymentStatus.CANCELED
    payment.canceled_at = datetime.utcnow()
    logger.info(f"Payment {payment.payment_key} refunded for order {order.id}")


def _load_order(db: Session, order_id: int) -> Optional[Order]:
    return (
        db.query(Order)
        .options(selectinload(Order.items), selectinload(Order.payment))
        .filter(Order.id == order_id)
        .first()
    )


def create_order(db: Session, user_id: int, data: CreateOrderIn) -> Order:
    total_price = 0
    order_items = []
    for line in data.items:
        product = db.get(Product, line.product_id)
        if product is None:
            raise HttpException(404, f"Product {line.product_id} not found.")
        total_price += product.price * line.quantity
        order_items.append(OrderItem(product_id=product.id, quantity=line.quantity, price=product.price))

    order = Order(
        user_id=user_id,
        total_price=total_price,
        status=OrderStatus.PENDING,
        recipient_name=data.recipient_name,
        recipient_phone=data.recipient_phone,
        zip_code=data.zip_code,
        address1=data.address1,
        address2=data.address2,
        gate_password=data.gate_password,
        delivery_request=data.delivery_request,
        items=order_items,
    )
    try:
        db.add(order)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(order)
    logger.info(f"Order {order.id} created for user {user_id} (total {total_price})")
    return order


def confirm_order(db: Session, gateway: PaymentGateway, user_id: int, data: ConfirmOrderIn) -> Order:
    order = db.get(Order, data.order_id)
    if order is None:
        raise HttpException(404, ORDER_NOT_FOUND)
    if order.user_id != user_id:
        raise HttpException(403, "You do not have permission to confirm this order.")
    if order.total_price != data.amount:
        raise HttpException(400, "Payment amount does not match the order total.")
    if order.status != OrderStatus.PENDING:
        raise HttpException(400, ALREADY_PROCESSED)

    try:
        result = gateway.confirm(data.payment_key, order.id, data.amount)
    except PaymentGatewayError as e:
        logger.error(f"Payment confirmation failed for order {order.id}: {e}")
        raise HttpException(400, e.message or "Payment confirmation failed.")

    try:
        if not set_status_if(db, order.id, OrderStatus.PENDING, {Order.status: OrderStatus.PAID}):
            raise HttpException(400, ALREADY_PROCESSED)
        db.add(
            Payment(
                order_id=order.id,
                payment_key=data.payment_key,
                method=result.get("method"),
                amount=data.amount,
                status=PaymentStatus.PAID,
                approved_at=_parse_approved_at(result.get("approvedAt")),
            )
        )
        db.commit()
    except (HttpException, IntegrityError):
        db.rollback()
        # another request paid this order between our check and the write
        _refund_orphan_payment(gateway, data.payment_key, order.id)
        raise HttpException(400, ALREADY_PROCESSED)
    except Exception:
        db.rollback()
        raise

    logger.info(f"Order {order.id} paid ({data.amount})")
    return _load_order(db, order.id)


def _refund_orphan_payment(gateway: PaymentGateway, payment_key: str, order_id: int):
    try:
        gateway.cancel(payment_key, "Duplicate payment confirmation")
    except PaymentGatewayError as e:
        logger.error(f"Could not refund duplicate payment {payment_key} for order {order_id}: {e}")


def get_my_orders(db: Session, user_id: int, page: int, limit: int) -> dict:
    query = (
        db.query(Order)
        .options(selectinload(Order.items), selectinload(Order.payment))
        .filter(Order.user_id == user_id)
        .order_by(Order.created_at.desc(), Order.id.desc())
    )
    return paginate(query, page, limit)


def get_order_detail(db: Session, user_id: int, order_id: int) -> Order:
    order = _load_order(db, order_id)
    if order is None or order.user_id != user_id:
        raise HttpException(404, ORDER_NOT_FOUND)
    return order


def cancel_order(db: Session, gateway: PaymentGateway, user_id: int, order_id: int) -> Order:
    order = _load_order(db, order_id)
    if order is None or order.user_id != user_id:
        raise HttpException(404, ORDER_NOT_FOUND)
    if order.status == OrderStatus.CANCELED:
        raise HttpException(400, "This order has already been canceled.")
    if not can_transition(order.status, OrderStatus.CANCELED):
        raise HttpException(400, "The order has already shipped and can no longer be canceled.")

    previous = order.status
    try:
        # the row must still be in the status we checked before any money moves
        if not set_status_if(db, order.id, previous, {Order.status: OrderStatus.CANCELED}):
            raise HttpException(400, ALREADY_PROCESSED)
        if previous == OrderStatus.PAID and order.payment is not None:
            refund_payment(gateway, order, "Canceled at customer's request")
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(f"Order {order.id} canceled (was {previous.value})")
    return _load_order(db, order.id)


def request_return(db: Session, user_id: int, order_id: int, data: ReturnOrderIn) -> Order:
    order = db.get(Order, order_id)
    if order is None or order.user_id != user_id:
        raise HttpException(404, ORDER_NOT_FOUND)
    if order.status != OrderStatus.DELIVERED:
        raise HttpException(400, "Only delivered orders can be returned.")

    try:
        changed = set_status_if(
            db,
            order.id,
            OrderStatus.DELIVERED,
            {Order.status: OrderStatus.RETURN_REQUESTED, Order.return_reason: data.reason},
        )
        if not changed:
            raise HttpException(400, "Only delivered orders can be returned.")
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(f"Return requested for order {order.id}")
    return _load_order(db, order.id)
