import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.core.security import hash_password
from storefront.db.session import Base, get_db
from storefront.main import app
from storefront.models import Category, Product, ProductImage, User
from storefront.models.enums import Gender, Role
from storefront.services.payment_gateway import PaymentGatewayError, get_payment_gateway
import storefront.models  # noqa: F401

PASSWORD = "password123"


class FakeGateway:
    """Records calls; set ``fail_confirm`` / ``fail_cancel`` to make them raise."""

    def __init__(self):
        self.confirm_calls = []
        self.cancel_calls = []
        self.fail_confirm = False
        self.fail_cancel = False
        # called inside confirm(), before it returns
        self.during_confirm = None

    def confirm(self, payment_key, order_id, amount):
        self.confirm_calls.append((payment_key, order_id, amount))
        if self.fail_confirm:
            raise PaymentGatewayError("Card declined.", status_code=400)
        if self.during_confirm:
            self.during_confirm()
        return {"method": "CARD", "approvedAt": "2024-05-01T10:00:00+09:00"}

    def cancel(self, payment_key, reason):
        self.cancel_calls.append((payment_key, reason))
        if self.fail_cancel:
            raise PaymentGatewayError("Cancel rejected.", status_code=400)
        return {"status": "CANCELED"}


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def client(db_session, gateway):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_payment_gateway] = lambda: gateway
    yield TestClient(app)
    app.dependency_overrides.clear()


def make_user(db, email="user@example.com", name="Kim", role=Role.USER):
    user = User(
        email=email,
        password=hash_password(PASSWORD),
        name=name,
        phone="010-1234-5678",
        birthdate="1990-01-01",
        gender=Gender.MALE,
        role=role,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def login(client, email):
    res = client.post("/api/auth/login", json={"email": email, "password": PASSWORD})
    assert res.status_code == 200, res.text
    return {"Authorization": f"Bearer {res.json()['data']['token']}"}


@pytest.fixture
def user(db_session):
    return make_user(db_session)


@pytest.fixture
def auth(client, user):
    return login(client, user.email)


@pytest.fixture
def other_auth(client, db_session):
    other = make_user(db_session, email="other@example.com", name="Lee")
    return login(client, other.email)


@pytest.fixture
def admin_auth(client, db_session):
    admin = make_user(db_session, email="admin@example.com", name="Admin", role=Role.ADMIN)
    return login(client, admin.email)


def make_category(db, name, path, parent=None):
    category = Category(name=name, path=path, parent_id=parent.id if parent else None)
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


def make_product(db, category, name="Round Frame", price=10000, material="Titanium", summary="Light frame"):
    product = Product(
        name=name,
        price=price,
        material=material,
        summary=summary,
        collection="2024 SS",
        lens="Clear",
        origin_country="Korea",
        shape="Round",
        size_info="50-20-145",
        category_id=category.id,
        images=[ProductImage(url=f"https://img.example.com/{name}.jpg")],
    )
    db.add(product)
    db.commit()
    db.refresh(product)
    return product


@pytest.fixture
def category(db_session):
    return make_category(db_session, "Glasses", "glasses")


@pytest.fixture
def product(db_session, category):
    return make_product(db_session, category)


SHIPPING = {
    "recipientName": "Kim",
    "recipientPhone": "010-1234-5678",
    "zipCode": "06000",
    "address1": "Seoul",
    "address2": "101",
}


def checkout(client, headers, product_id, quantity=1):
    res = client.post(
        "/api/orders/checkout",
        json={"items": [{"productId": product_id, "quantity": quantity}], **SHIPPING},
        headers=headers,
    )
    assert res.status_code == 201, res.text
    return res.json()["data"]


def pay(client, headers, order, payment_key="pk_test_1"):
    return client.post(
        "/api/orders/confirm",
        json={"orderId": order["id"], "paymentKey": payment_key, "amount": order["totalPrice"]},
        headers=headers,
    )
