from sqlalchemy import Column, Integer, String, DateTime, Enum, ForeignKey
from sqlalchemy.orm import relationship
from storefront.db.session import Base
from storefront.models.enums import OrderStatus, PaymentStatus
from datetime import datetime


class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    # sum of the item snapshots at checkout, never recomputed
    total_price = Column(Integer, nullable=False)
    status = Column(Enum(OrderStatus, native_enum=False), nullable=False, default=OrderStatus.PENDING, index=True)
    recipient_name = Column(String(100), nullable=False)
    recipient_phone = Column(String(30), nullable=False)
    zip_code = Column(String(20), nullable=False)
    address1 = Column(String(255), nullable=False)
    address2 = Column(String(255), nullable=False, default="")
    gate_password = Column(String(50), nullable=True)
    delivery_request = Column(String(255), nullable=True)
    tracking_number = Column(String(100), nullable=True)
    carrier = Column(String(100), nullable=True)
    return_reason = Column(String(500), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = relationship("User")
    items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.id",
    )
    payment = relationship("Payment", back_populates="order", uselist=False, cascade="all, delete-orphan")


class OrderItem(Base):
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="SET NULL"), nullable=True, index=True)
    quantity = Column(Integer, nullable=False)
    # unit price copied from the product when the order was placed
    price = Column(Integer, nullable=False)

    order = relationship("Order", back_populates="items")
    product = relationship("Product")


class Payment(Base):
    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), unique=True, nullable=False)
    payment_key = Column(String(200), nullable=False)
    method = Column(String(50), nullable=True)
    amount = Column(Integer, nullable=False)
    status = Column(Enum(PaymentStatus, native_enum=False), nullable=False, default=PaymentStatus.PAID)
    approved_at = Column(DateTime, nullable=True)
    canceled_at = Column(DateTime, nullable=True)

    order = relationship("Order", back_populates="payment")
