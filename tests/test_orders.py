import pytest
from sqlalchemy import update

from storefront.models import Order, Payment, Product
from storefront.models.enums import OrderStatus, PaymentStatus
from storefront.services import order_service
from tests.conftest import SHIPPING, checkout, make_product, pay


def set_status(db, order_id, status):
    db.query(Order).filter(Order.id == order_id).update({Order.status: status})
    db.commit()


def test_checkout_snapshots_prices(client, auth, product, db_session):
    order = checkout(client, auth, product.id, quantity=3)
    assert order["status"] == "PENDING"
    assert order["totalPrice"] == product.price * 3
    assert order["items"][0]["price"] == product.price

    db_session.query(Product).filter(Product.id == product.id).update({Product.price: 99999})
    db_session.commit()

    detail = client.get(f"/api/orders/{order['id']}", headers=auth).json()["data"]
    assert detail["totalPrice"] == 10000 * 3
    assert detail["items"][0]["price"] == 10000


def test_checkout_unknown_product_creates_nothing(client, auth, product, db_session):
    res = client.post(
        "/api/orders/checkout",
        json={"items": [{"productId": product.id, "quantity": 1}, {"productId": 555, "quantity": 1}], **SHIPPING},
        headers=auth,
    )
    assert res.status_code == 404
    assert "555" in res.json()["message"]
    assert db_session.query(Order).count() == 0


def test_checkout_requires_items(client, auth):
    res = client.post("/api/orders/checkout", json={"items": [], **SHIPPING}, headers=auth)
    assert res.status_code == 400


def test_confirm_marks_order_paid(client, auth, product, gateway):
    order = checkout(client, auth, product.id, quantity=2)
    res = pay(client, auth, order)
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["status"] == "PAID"
    assert data["payment"]["amount"] == order["totalPrice"]
    assert data["payment"]["method"] == "CARD"
    assert data["payment"]["approvedAt"].startswith("2024-05-01T01:00:00")
    assert gateway.confirm_calls == [("pk_test_1", order["id"], order["totalPrice"])]


def test_confirm_twice_is_rejected(client, auth, product, gateway, db_session):
    order = checkout(client, auth, product.id)
    assert pay(client, auth, order).status_code == 200
    res = pay(client, auth, order, payment_key="pk_test_2")
    assert res.status_code == 400
    assert len(gateway.confirm_calls) == 1
    assert db_session.query(Payment).count() == 1


def test_confirm_amount_mismatch(client, auth, product, gateway):
    order = checkout(client, auth, product.id)
    res = client.post(
        "/api/orders/confirm",
        json={"orderId": order["id"], "paymentKey": "pk", "amount": order["totalPrice"] - 1},
        headers=auth,
    )
    assert res.status_code == 400
    assert gateway.confirm_calls == []


def test_confirm_someone_elses_order(client, auth, other_auth, product):
    order = checkout(client, auth, product.id)
    assert pay(client, other_auth, order).status_code == 403


def test_confirm_unknown_order(client, auth):
    res = client.post("/api/orders/confirm", json={"orderId": 321, "paymentKey": "pk", "amount": 1}, headers=auth)
    assert res.status_code == 404


def test_gateway_failure_leaves_order_pending(client, auth, product, gateway, db_session):
    gateway.fail_confirm = True
    order = checkout(client, auth, product.id)

    res = pay(client, auth, order)
    assert res.status_code == 400
    assert res.json()["message"] == "Card declined."
    db_session.expire_all()
    assert db_session.get(Order, order["id"]).status == OrderStatus.PENDING
    assert db_session.query(Payment).count() == 0


def test_confirm_losing_race_refunds_payment(client, auth, product, gateway, db_session):
    order = checkout(client, auth, product.id)
    # another request pays the order while the gateway call is in flight
    gateway.during_confirm = lambda: set_status(db_session, order["id"], OrderStatus.PAID)

    res = pay(client, auth, order)
    assert res.status_code == 400
    assert gateway.cancel_calls and gateway.cancel_calls[0][0] == "pk_test_1"
    assert db_session.query(Payment).count() == 0


def test_cancel_pending_order_skips_gateway(client, auth, product, gateway):
    order = checkout(client, auth, product.id)
    res = client.post(f"/api/orders/{order['id']}/cancel", headers=auth)
    assert res.status_code == 200
    assert res.json()["data"]["status"] == "CANCELED"
    assert gateway.cancel_calls == []


def test_cancel_paid_order_refunds(client, auth, product, gateway, db_session):
    order = checkout(client, auth, product.id)
    pay(client, auth, order)

    res = client.post(f"/api/orders/{order['id']}/cancel", headers=auth)
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["status"] == "CANCELED"
    assert data["payment"]["status"] == "CANCELED"
    assert data["payment"]["canceledAt"] is not None
    assert [call[0] for call in gateway.cancel_calls] == ["pk_test_1"]


def test_refund_failure_aborts_cancel(client, auth, product, gateway, db_session):
    order = checkout(client, auth, product.id)
    pay(client, auth, order)
    gateway.fail_cancel = True

    res = client.post(f"/api/orders/{order['id']}/cancel", headers=auth)
    assert res.status_code == 500
    db_session.expire_all()
    stored = db_session.get(Order, order["id"])
    assert stored.status == OrderStatus.PAID
    assert stored.payment.status == PaymentStatus.PAID


@pytest.mark.parametrize(
    "status",
    [
        OrderStatus.SHIPPED,
        OrderStatus.DELIVERED,
        OrderStatus.RETURN_REQUESTED,
        OrderStatus.RETURN_COMPLETED,
        OrderStatus.CANCELED,
    ],
)
def test_cancel_rejected_after_payment_stage(client, auth, product, db_session, gateway, status):
    order = checkout(client, auth, product.id)
    set_status(db_session, order["id"], status)

    res = client.post(f"/api/orders/{order['id']}/cancel", headers=auth)
    assert res.status_code == 400
    assert gateway.cancel_calls == []


def test_cancel_other_users_order_is_404(client, auth, other_auth, product):
    order = checkout(client, auth, product.id)
    assert client.post(f"/api/orders/{order['id']}/cancel", headers=other_auth).status_code == 404


def test_return_only_from_delivered(client, auth, product, db_session):
    order = checkout(client, auth, product.id)
    url = f"/api/orders/{order['id']}/return"

    assert client.post(url, json={"reason": "Wrong size"}, headers=auth).status_code == 400

    set_status(db_session, order["id"], OrderStatus.DELIVERED)
    res = client.post(url, json={"reason": "Wrong size"}, headers=auth)
    assert res.status_code == 200
    assert res.json()["data"]["status"] == "RETURN_REQUESTED"
    assert res.json()["data"]["returnReason"] == "Wrong size"

    assert client.post(url, json={"reason": "Wrong size"}, headers=auth).status_code == 400


def test_return_reason_too_short(client, auth, product, db_session):
    order = checkout(client, auth, product.id)
    set_status(db_session, order["id"], OrderStatus.DELIVERED)
    res = client.post(f"/api/orders/{order['id']}/return", json={"reason": "bad"}, headers=auth)
    assert res.status_code == 400


def test_my_orders_are_paginated_and_private(client, auth, other_auth, product, db_session, category):
    second = make_product(db_session, category, name="Second")
    checkout(client, auth, product.id)
    newest = checkout(client, auth, second.id)
    checkout(client, other_auth, product.id)

    body = client.get("/api/orders/", params={"limit": 1}, headers=auth).json()
    assert body["pagination"]["total"] == 2
    assert body["data"][0]["id"] == newest["id"]

    assert client.get(f"/api/orders/{newest['id']}", headers=other_auth).status_code == 404


def test_order_item_survives_product_deletion(client, auth, admin_auth, product):
    order = checkout(client, auth, product.id)
    client.delete(f"/api/admin/products/{product.id}", headers=admin_auth)

    detail = client.get(f"/api/orders/{order['id']}", headers=auth).json()["data"]
    assert detail["items"][0]["productId"] is None
    assert detail["items"][0]["price"] == 10000


def test_cancel_rechecks_status_before_refund(client, auth, product, gateway, db_session, monkeypatch):
    order = checkout(client, auth, product.id)
    pay(client, auth, order)
    load_order = order_service._load_order

    def load_then_ship(db, order_id):
        loaded = load_order(db, order_id)
        # an admin ships the order after the customer's request read it as PAID
        db.execute(
            update(Order)
            .where(Order.id == order_id)
            .values(status=OrderStatus.SHIPPED)
            .execution_options(synchronize_session=False)
        )
        return loaded

    monkeypatch.setattr(order_service, "_load_order", load_then_ship)

    res = client.post(f"/api/orders/{order['id']}/cancel", headers=auth)
    assert res.status_code == 400
    assert gateway.cancel_calls == []
    db_session.expire_all()
    assert db_session.get(Order, order["id"]).payment.status == PaymentStatus.PAID
