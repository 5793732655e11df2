def register_payload(**overrides):
    payload = {
        "firstname": "Grace",
        "lastname": "Hopper",
        "email": "grace@example.com",
        "password": "cobol1959",
        "password_confirmation": "cobol1959",
    }
    payload.update(overrides)
    return payload


def test_register_returns_user_and_token(client):
    res = client.post("/api/register", json=register_payload())

    assert res.status_code == 201
    body = res.json()
    assert body["user"]["email"] == "grace@example.com"
    assert body["user"]["firstname"] == "Grace"
    assert "password" not in body["user"]
    assert body["token"]


def test_register_rejects_duplicate_email(client, make_user):
    make_user(email="grace@example.com")

    res = client.post("/api/register", json=register_payload())

    assert res.status_code == 422
    assert res.json()["errors"]["email"] == ["The email has already been taken."]


def test_register_rejects_mismatched_confirmation(client):
    res = client.post("/api/register", json=register_payload(password_confirmation="nope-nope"))

    assert res.status_code == 422
    assert "password" in res.json()["errors"]


def test_register_validation_errors_are_grouped_by_field(client):
    res = client.post("/api/register", json={"email": "not-an-email"})

    assert res.status_code == 422
    errors = res.json()["errors"]
    assert {"firstname", "lastname", "email", "password"} <= set(errors)
    assert all(isinstance(messages, list) for messages in errors.values())


def test_login_returns_user_and_token(client, make_user):
    make_user(email="ada@example.com", password="analytical")

    res = client.post("/api/login", json={"email": "ada@example.com", "password": "analytical"})

    assert res.status_code == 200
    body = res.json()
    assert body["user"]["email"] == "ada@example.com"
    assert set(body["user"]) == {"id", "firstname", "lastname", "email"}
    assert body["token"]


def test_login_with_wrong_password_is_unauthenticated(client, make_user):
    make_user(email="ada@example.com", password="analytical")

    res = client.post("/api/login", json={"email": "ada@example.com", "password": "wrong"})

    assert res.status_code == 401
    assert res.json()["message"] == "Incorrect email or password"


def test_current_user_requires_token(client):
    assert client.get("/api/user").status_code == 401


def test_current_user(client, user, auth_headers):
    res = client.get("/api/user", headers=auth_headers)

    assert res.status_code == 200
    assert res.json()["id"] == user.id


def test_logout_revokes_token(client, auth_headers):
    res = client.post("/api/logout", headers=auth_headers)

    assert res.status_code == 200
    assert client.get("/api/user", headers=auth_headers).status_code == 401


def test_garbage_token_is_rejected(client):
    res = client.get("/api/user", headers={"Authorization": "Bearer not-a-jwt"})

    assert res.status_code == 401
    assert res.json()["message"] == "Unauthenticated."
