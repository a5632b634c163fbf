from tests.conftest import make_product


def test_empty_cart_is_created_lazily(client, auth):
    res = client.get("/api/cart/", headers=auth)
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["items"] == []
    assert data["totalPrice"] == 0


def test_add_same_product_merges_quantity(client, auth, product):
    first = client.post("/api/cart/items", json={"productId": product.id, "quantity": 2}, headers=auth)
    second = client.post("/api/cart/items", json={"productId": product.id}, headers=auth)
    assert first.status_code == 201
    assert second.json()["data"]["id"] == first.json()["data"]["id"]
    assert second.json()["data"]["quantity"] == 3

    cart = client.get("/api/cart/", headers=auth).json()["data"]
    assert len(cart["items"]) == 1
    assert cart["items"][0]["product"]["name"] == product.name
    assert cart["totalPrice"] == product.price * 3


def test_add_unknown_product(client, auth):
    assert client.post("/api/cart/items", json={"productId": 999}, headers=auth).status_code == 404


def test_update_and_delete_item(client, auth, product, db_session, category):
    other = make_product(db_session, category, name="Second", price=500)
    item = client.post("/api/cart/items", json={"productId": product.id}, headers=auth).json()["data"]
    client.post("/api/cart/items", json={"productId": other.id}, headers=auth)

    res = client.patch(f"/api/cart/items/{item['id']}", json={"quantity": 5}, headers=auth)
    assert res.status_code == 200
    assert res.json()["data"]["quantity"] == 5

    res = client.delete(f"/api/cart/items/{item['id']}", headers=auth)
    assert res.status_code == 200
    cart = client.get("/api/cart/", headers=auth).json()["data"]
    assert [line["productId"] for line in cart["items"]] == [other.id]


def test_quantity_must_be_positive(client, auth, product):
    item = client.post("/api/cart/items", json={"productId": product.id}, headers=auth).json()["data"]
    res = client.patch(f"/api/cart/items/{item['id']}", json={"quantity": 0}, headers=auth)
    assert res.status_code == 400


def test_cannot_touch_another_users_item(client, auth, other_auth, product):
    item = client.post("/api/cart/items", json={"productId": product.id}, headers=auth).json()["data"]

    assert client.patch(f"/api/cart/items/{item['id']}", json={"quantity": 2}, headers=other_auth).status_code == 404
    assert client.delete(f"/api/cart/items/{item['id']}", headers=other_auth).status_code == 404
