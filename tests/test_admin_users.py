NEW_USER = {
    "name": "Jung",
    "email": "jung@example.com",
    "password": "jung-password",
    "phone": "010-2222-3333",
    "birthdate": "1988-08-08",
    "gender": "MALE",
}


def test_create_user_defaults_to_user_role(client, admin_auth):
    res = client.post("/api/admin/users/", json=NEW_USER, headers=admin_auth)
    assert res.status_code == 201
    assert res.json()["data"]["role"] == "USER"

    login = client.post("/api/auth/login", json={"email": NEW_USER["email"], "password": NEW_USER["password"]})
    assert login.status_code == 200


def test_create_user_duplicate_email(client, admin_auth, user):
    res = client.post("/api/admin/users/", json={**NEW_USER, "email": user.email}, headers=admin_auth)
    assert res.status_code == 409


def test_list_users_paginated(client, admin_auth, user):
    res = client.get("/api/admin/users/", params={"limit": 1}, headers=admin_auth)
    assert res.status_code == 200
    body = res.json()
    assert len(body["data"]) == 1
    assert body["pagination"]["total"] == 2
    assert body["pagination"]["totalPages"] == 2


def test_user_detail_404(client, admin_auth):
    res = client.get("/api/admin/users/999", headers=admin_auth)
    assert res.status_code == 404


def test_update_user_to_taken_email(client, admin_auth, user, db_session):
    created = client.post("/api/admin/users/", json=NEW_USER, headers=admin_auth).json()["data"]
    res = client.patch(f"/api/admin/users/{created['id']}", json={"email": user.email}, headers=admin_auth)
    assert res.status_code == 409


def test_update_user_rehashes_password(client, admin_auth, user):
    res = client.patch(f"/api/admin/users/{user.id}", json={"password": "reset-password", "role": "ADMIN"}, headers=admin_auth)
    assert res.status_code == 200
    assert res.json()["data"]["role"] == "ADMIN"

    login = client.post("/api/auth/login", json={"email": user.email, "password": "reset-password"})
    assert login.status_code == 200
