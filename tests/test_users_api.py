"""Tests for /register, /login and /users"""

from fastapi.testclient import TestClient

from config import settings


def test_health_endpoint(client: TestClient):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_register_success(register):
    response = register(phone="555-0100", email="alice@example.com")
    assert response.status_code == 200
    assert response.json() == {"message": "Registration successful"}


def test_register_duplicate_username_conflicts(register, client: TestClient):
    assert register(password="first", email="first@example.com").status_code == 200

    response = register(password="second", email="second@example.com")
    assert response.status_code == 400
    assert response.json() == {"message": "Username already exists"}

    # Original record untouched: old password still works, email unchanged
    login = client.post("/login", json={"username": "alice", "password": "first"})
    assert login.status_code == 200
    assert login.json()["user"]["email"] == "first@example.com"
    assert client.post("/login", json={"username": "alice", "password": "second"}).status_code == 400


def test_register_missing_password_fails(client: TestClient):
    response = client.post("/register", json={"username": "bob"})
    assert response.status_code == 500
    assert response.json() == {"message": "Registration failed"}
    assert client.get("/users").json() == []


def test_register_empty_username_fails(client: TestClient):
    response = client.post("/register", json={"username": "", "password": "x"})
    assert response.status_code == 500
    assert response.json() == {"message": "Registration failed"}
    assert client.get("/users").json() == []


def test_register_without_body_fails(client: TestClient):
    response = client.post("/register")
    assert response.status_code == 500
    assert response.json() == {"message": "Registration failed"}


def test_login_success_returns_user_without_hash(register, client: TestClient):
    register(phone="555-0100", email="alice@example.com")
    response = client.post("/login", json={"username": "alice", "password": "s3cret"})
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Login successful"
    user = data["user"]
    assert user["username"] == "alice"
    assert user["phone"] == "555-0100"
    assert user["email"] == "alice@example.com"
    assert len(user["_id"]) == 24
    assert "password" not in user


def test_login_can_expose_hash_for_legacy_clients(register, client: TestClient, monkeypatch):
    monkeypatch.setattr(settings, "expose_password_hash", True)
    register()
    response = client.post("/login", json={"username": "alice", "password": "s3cret"})
    assert response.status_code == 200
    stored = response.json()["user"]["password"]
    assert stored.startswith("$2b$")
    assert stored != "s3cret"


def test_login_wrong_password(register, client: TestClient):
    register()
    response = client.post("/login", json={"username": "alice", "password": "nope"})
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid password"}


def test_login_missing_password_fails(register, client: TestClient):
    register()
    response = client.post("/login", json={"username": "alice"})
    assert response.status_code == 500
    assert response.json() == {"message": "Login failed"}


def test_login_unknown_user(client: TestClient):
    response = client.post("/login", json={"username": "ghost", "password": "x"})
    assert response.status_code == 404
    assert response.json() == {"message": "User not found"}


def test_list_users_projection(register, client: TestClient):
    register("alice", phone="555-0100", email="alice@example.com")
    register("bob")
    response = client.get("/users")
    assert response.status_code == 200
    users = {u["username"]: u for u in response.json()}
    assert set(users) == {"alice", "bob"}
    assert users["alice"]["email"] == "alice@example.com"
    assert users["alice"]["phone"] == "555-0100"
    for u in users.values():
        assert "password" not in u
        assert "address" not in u
    assert set(users["bob"]) == {"_id", "username"}


def test_list_users_empty(client: TestClient):
    response = client.get("/users")
    assert response.status_code == 200
    assert response.json() == []


def test_cors_allows_configured_origin(client: TestClient):
    response = client.options(
        "/loan-applications",
        headers={"Origin": "http://localhost:3000", "Access-Control-Request-Method": "GET"},
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"
    assert response.headers["access-control-allow-credentials"] == "true"


def test_cors_ignores_other_origins(client: TestClient):
    response = client.get("/users", headers={"Origin": "http://evil.example"})
    assert response.status_code == 200
    assert "access-control-allow-origin" not in response.headers


def test_unknown_route_uses_message_key(client: TestClient):
    response = client.get("/nope")
    assert response.status_code == 404
    assert "message" in response.json()
