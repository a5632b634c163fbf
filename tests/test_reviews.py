from storefront.models import ReviewImage
from storefront.models.enums import OrderStatus
from tests.conftest import checkout
from tests.test_orders import set_status

CONTENT = "Fits well and looks great."


def deliver(client, headers, db, product_id):
    order = checkout(client, headers, product_id)
    set_status(db, order["id"], OrderStatus.DELIVERED)
    return order


def write_review(client, headers, product_id, rating=5, **extra):
    return client.post(
        "/api/reviews/",
        json={"productId": product_id, "rating": rating, "content": CONTENT, **extra},
        headers=headers,
    )


def test_review_requires_delivered_order(client, auth, product, db_session):
    assert write_review(client, auth, product.id).status_code == 403

    order = checkout(client, auth, product.id)
    set_status(db_session, order["id"], OrderStatus.SHIPPED)
    assert write_review(client, auth, product.id).status_code == 403

    set_status(db_session, order["id"], OrderStatus.DELIVERED)
    res = write_review(client, auth, product.id, imageUrls=["https://img.example.com/r1.jpg"])
    assert res.status_code == 201
    assert [img["url"] for img in res.json()["data"]["images"]] == ["https://img.example.com/r1.jpg"]


def test_duplicate_review_is_409(client, auth, product, db_session):
    deliver(client, auth, db_session, product.id)
    write_review(client, auth, product.id)
    assert write_review(client, auth, product.id).status_code == 409


def test_rating_out_of_range(client, auth, product, db_session):
    deliver(client, auth, db_session, product.id)
    assert write_review(client, auth, product.id, rating=6).status_code == 400


def test_product_reviews_are_public_and_sorted(client, auth, other_auth, product, db_session):
    deliver(client, auth, db_session, product.id)
    deliver(client, other_auth, db_session, product.id)
    write_review(client, auth, product.id, rating=2)
    write_review(client, other_auth, product.id, rating=5)

    res = client.get(f"/api/reviews/product/{product.id}", params={"sort": "rating_desc"})
    assert res.status_code == 200
    data = res.json()["data"]
    assert [r["rating"] for r in data] == [5, 2]
    assert data[0]["user"]["name"] == "Lee"

    asc = client.get(f"/api/reviews/product/{product.id}", params={"sort": "rating_asc"}).json()["data"]
    assert [r["rating"] for r in asc] == [2, 5]


def test_my_reviews(client, auth, product, db_session):
    deliver(client, auth, db_session, product.id)
    write_review(client, auth, product.id)

    body = client.get("/api/reviews/me", headers=auth).json()
    assert body["pagination"]["total"] == 1
    assert body["data"][0]["product"]["name"] == product.name


def test_update_review_replaces_images(client, auth, product, db_session):
    deliver(client, auth, db_session, product.id)
    review = write_review(client, auth, product.id, imageUrls=["https://img.example.com/a.jpg"]).json()["data"]

    res = client.put(
        f"/api/reviews/{review['id']}",
        json={"rating": 3, "imageUrls": ["https://img.example.com/b.jpg", "https://img.example.com/c.jpg"]},
        headers=auth,
    )
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["rating"] == 3
    assert data["content"] == CONTENT
    assert [img["url"] for img in data["images"]] == ["https://img.example.com/b.jpg", "https://img.example.com/c.jpg"]
    assert db_session.query(ReviewImage).count() == 2


def test_update_or_delete_other_users_review_is_403(client, auth, other_auth, product, db_session):
    deliver(client, auth, db_session, product.id)
    review = write_review(client, auth, product.id).json()["data"]

    assert client.put(f"/api/reviews/{review['id']}", json={"rating": 1}, headers=other_auth).status_code == 403
    assert client.delete(f"/api/reviews/{review['id']}", headers=other_auth).status_code == 403
    assert client.delete("/api/reviews/999", headers=auth).status_code == 403


def test_delete_review(client, auth, product, db_session):
    deliver(client, auth, db_session, product.id)
    review = write_review(client, auth, product.id, imageUrls=["https://img.example.com/a.jpg"]).json()["data"]

    res = client.delete(f"/api/reviews/{review['id']}", headers=auth)
    assert res.status_code == 200
    assert res.json()["deletedId"] == review["id"]
    assert db_session.query(ReviewImage).count() == 0


def test_admin_review_list_and_delete(client, auth, admin_auth, product, db_session, user):
    deliver(client, auth, db_session, product.id)
    review = write_review(client, auth, product.id).json()["data"]

    listed = client.get("/api/admin/reviews/", params={"productId": product.id}, headers=admin_auth).json()
    assert listed["pagination"]["total"] == 1
    assert listed["data"][0]["user"]["email"] == user.email

    by_name = client.get("/api/admin/reviews/", params={"search": "Kim"}, headers=admin_auth).json()
    assert by_name["pagination"]["total"] == 1

    assert client.delete(f"/api/admin/reviews/{review['id']}", headers=admin_auth).status_code == 200
    assert client.delete(f"/api/admin/reviews/{review['id']}", headers=admin_auth).status_code == 404
