from pydantic import Field
from typing import List, Optional
from datetime import datetime
from storefront.models.enums import OrderStatus, PaymentStatus
from storefront.schemas.common import CamelModel


class OrderItemOut(CamelModel):
    id: int
    product_id: Optional[int] = None
    quantity: int
    price: int


class PaymentOut(CamelModel):
    method: Optional[str] = None
    amount: int
    status: PaymentStatus
    approved_at: Optional[datetime] = None
    canceled_at: Optional[datetime] = None


class OrderOut(CamelModel):
    id: int
    user_id: int
    total_price: int
    status: OrderStatus
    recipient_name: str
    recipient_phone: str
    zip_code: str
    address1: str
    address2: str
    gate_password: Optional[str] = None
    delivery_request: Optional[str] = None
    tracking_number: Optional[str] = None
    carrier: Optional[str] = None
    return_reason: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    items: List[OrderItemOut] = []
    payment: Optional[PaymentOut] = None


class OrderUserOut(CamelModel):
    id: int
    name: str
    email: str
    phone: str


class AdminOrderOut(OrderOut):
    user: OrderUserOut


class OrderLineIn(CamelModel):
    product_id: int = Field(..., ge=1)
    quantity: int = Field(..., ge=1)


class CreateOrderIn(CamelModel):
    items: List[OrderLineIn] = Field(..., min_length=1)
    recipient_name: str = Field(..., min_length=1)
    recipient_phone: str = Field(..., min_length=1)
    zip_code: str = Field(..., min_length=1)
    address1: str = Field(..., min_length=1)
    address2: str = ""
    gate_password: Optional[str] = None
    delivery_request: Optional[str] = None


class ConfirmOrderIn(CamelModel):
    order_id: int = Field(..., ge=1)
    payment_key: str = Field(..., min_length=1)
    amount: int = Field(..., ge=0)


class ReturnOrderIn(CamelModel):
    reason: str = Field(..., min_length=5)


class UpdateOrderStatusIn(CamelModel):
    status: OrderStatus
    tracking_number: Optional[str] = None
    carrier: Optional[str] = None
    # bypasses the transition table; kept for manual corrections
    force: bool = False
