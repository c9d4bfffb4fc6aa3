# =============================================================================
# tests/test_api.py - HTTP Endpoint Tests
# =============================================================================
# Runs the FastAPI application with the repositories replaced by in-memory
# fakes (no database, lifespan not started) and checks status-code mapping:
# 200/201/204 success, 400 malformed input, 404 absent, 409 conflict,
# 500 generic failure.
# =============================================================================

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import IntegrityError

from app.config import Settings
from app.dependencies import get_category_repository, get_user_repository
from app.main import create_app
from app.models import Category
from tests.fakes import InMemoryCategoryRepository, InMemoryUserRepository


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def category_repo():
    return InMemoryCategoryRepository([Category(name="Food", user_id=None, is_default=True)])


@pytest.fixture
def app(user_repo, category_repo):
    app = create_app(Settings(_env_file=None))
    app.dependency_overrides[get_user_repository] = lambda: user_repo
    app.dependency_overrides[get_category_repository] = lambda: category_repo
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


def register(client, username="alice", email="alice@moneytale.io", password="s3cret-pass", **extra):
    return client.post(
        "/users", json={"username": username, "email_address": email, "password": password, **extra}
    )


# =============================================================================
# Dashboard
# =============================================================================

class TestDashboard:
    def test_known_email_returns_username(self, client):
        register(client)

        response = client.get("/dashboard", params={"email": "alice@moneytale.io"})

        assert response.status_code == 200
        assert response.json() == {"username": "alice"}

    def test_mixed_case_domain_matches_registration(self, client):
        register(client, username="bob", email="Bob@Example.COM")

        response = client.get("/dashboard", params={"email": "Bob@Example.COM"})

        assert response.status_code == 200
        assert response.json() == {"username": "bob"}

    def test_unknown_email_returns_404(self, client):
        response = client.get("/dashboard", params={"email": "nonexistent@x.com"})

        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"

    @pytest.mark.parametrize("email", ["not-an-email", "", "bob@"])
    def test_malformed_email_returns_400(self, client, email):
        response = client.get("/dashboard", params={"email": email})

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_missing_email_returns_400(self, client):
        assert client.get("/dashboard").status_code == 400

    def test_unexpected_error_returns_generic_500(self, app):
        class BrokenRepository(InMemoryUserRepository):
            async def get_by_email(self, email):
                raise RuntimeError("connection to db.internal refused")

        app.dependency_overrides[get_user_repository] = lambda: BrokenRepository()
        client = TestClient(app, raise_server_exceptions=False)

        response = client.get("/dashboard", params={"email": "alice@moneytale.io"})

        assert response.status_code == 500
        assert response.json() == {"detail": "An unexpected error occurred", "code": "INTERNAL_ERROR"}
        assert "db.internal" not in response.text


# =============================================================================
# Users
# =============================================================================

class TestUsers:
    def test_register_returns_user_without_hash(self, client):
        response = register(client, user_role="Admin")

        assert response.status_code == 201
        body = response.json()
        assert body["username"] == "alice"
        assert body["user_role"] == "Admin"
        assert body["failed_login_attempts"] == 0
        assert body["updated_at"] is None
        assert "hashed_secret_key" not in body
        assert "password" not in body

    def test_password_is_hashed(self, client, user_repo):
        user_id = register(client).json()["id"]

        stored = user_repo._rows[user_id]
        assert stored.hashed_secret_key != "s3cret-pass"
        assert stored.hashed_secret_key.startswith("$2")

    def test_username_length_boundary(self, client):
        assert register(client, username="a" * 10).status_code == 201
        assert register(client, username="b" * 11, email="b@moneytale.io").status_code == 400

    def test_password_over_72_utf8_bytes_returns_400(self, client, user_repo):
        response = register(client, password="\u00e9" * 40)

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"
        assert user_repo._rows == {}

    def test_duplicate_username_returns_409(self, client):
        register(client)

        response = register(client, email="other@moneytale.io")

        assert response.status_code == 409
        assert response.json()["details"] == {"field": "username"}

    def test_duplicate_email_returns_409(self, client):
        register(client)

        response = register(client, username="bob")

        assert response.status_code == 409
        assert response.json()["details"] == {"field": "email_address"}

    def test_constraint_violation_from_store_returns_409(self, app):
        class RacyRepository(InMemoryUserRepository):
            async def add(self, user):
                raise IntegrityError("INSERT INTO Users", {}, Exception("UNIQUE constraint failed"))

        app.dependency_overrides[get_user_repository] = lambda: RacyRepository()

        response = register(TestClient(app))

        assert response.status_code == 409
        assert "UNIQUE" not in response.text

    def test_get_list_and_missing(self, client):
        user_id = register(client).json()["id"]

        assert client.get(f"/users/{user_id}").json()["username"] == "alice"
        assert [u["id"] for u in client.get("/users").json()] == [user_id]
        assert client.get("/users/999").status_code == 404

    def test_update_replaces_profile(self, client):
        user_id = register(client).json()["id"]

        response = client.put(
            f"/users/{user_id}",
            json={
                "username": "alicia",
                "email_address": "alicia@moneytale.io",
                "user_role": "Admin",
                "is_email_verified": True,
                "failed_login_attempts": 0,
            },
        )

        assert response.status_code == 200
        body = response.json()
        assert body["username"] == "alicia"
        assert body["is_email_verified"] is True
        assert body["updated_at"] is not None

    def test_update_missing_user_returns_404(self, client):
        response = client.put(
            "/users/999",
            json={
                "username": "ghost",
                "email_address": "ghost@moneytale.io",
                "user_role": "User",
                "is_email_verified": False,
                "failed_login_attempts": 0,
            },
        )

        assert response.status_code == 404

    def test_delete_is_idempotent(self, client):
        user_id = register(client).json()["id"]

        assert client.delete(f"/users/{user_id}").status_code == 204
        assert client.get(f"/users/{user_id}").status_code == 404
        assert client.delete(f"/users/{user_id}").status_code == 204


# =============================================================================
# Categories
# =============================================================================

class TestCategories:
    def test_user_categories_include_defaults(self, client):
        owner_id = register(client).json()["id"]
        other_id = register(client, username="bob", email="bob@moneytale.io").json()["id"]
        client.post("/categories", json={"name": "Hobby", "user_id": owner_id})

        owner_names = {c["name"] for c in client.get(f"/users/{owner_id}/categories").json()}
        other_names = {c["name"] for c in client.get(f"/users/{other_id}/categories").json()}

        assert owner_names == {"Food", "Hobby"}
        assert other_names == {"Food"}

    def test_user_categories_for_missing_user_returns_404(self, client):
        assert client.get("/users/999/categories").status_code == 404

    def test_create_for_missing_owner_returns_404(self, client):
        response = client.post("/categories", json={"name": "Hobby", "user_id": 999})

        assert response.status_code == 404

    def test_crud(self, client):
        created = client.post("/categories", json={"name": "Rent", "is_default": True})
        assert created.status_code == 201
        category_id = created.json()["id"]

        updated = client.put(f"/categories/{category_id}", json={"name": "Housing", "is_default": True})
        assert updated.status_code == 200
        assert updated.json()["name"] == "Housing"

        assert client.get(f"/categories/{category_id}").json()["name"] == "Housing"
        assert {c["name"] for c in client.get("/categories").json()} == {"Food", "Housing"}

        assert client.delete(f"/categories/{category_id}").status_code == 204
        assert client.get(f"/categories/{category_id}").status_code == 404
        assert client.delete(f"/categories/{category_id}").status_code == 204

    def test_update_missing_category_returns_404(self, client):
        assert client.put("/categories/999", json={"name": "Nothing"}).status_code == 404

    def test_overlong_name_returns_400(self, client):
        assert client.post("/categories", json={"name": "x" * 51}).status_code == 400


# =============================================================================
# Auth
# =============================================================================

class TestLogin:
    def test_successful_login_stamps_last_login(self, client):
        register(client)

        response = client.post("/auth/login", json={"email_address": "alice@moneytale.io", "password": "s3cret-pass"})

        assert response.status_code == 200
        assert response.json()["last_login_date"] is not None
        assert response.json()["failed_login_attempts"] == 0

    def test_unknown_email_returns_401(self, client):
        response = client.post("/auth/login", json={"email_address": "nobody@moneytale.io", "password": "whatever"})

        assert response.status_code == 401

    def test_failed_attempts_counted_and_capped(self, client):
        user_id = register(client).json()["id"]
        bad = {"email_address": "alice@moneytale.io", "password": "wrong-pass"}

        for _ in range(5):
            assert client.post("/auth/login", json=bad).status_code == 401

        assert client.get(f"/users/{user_id}").json()["failed_login_attempts"] == 5

        # Locked even with the right password
        good = {"email_address": "alice@moneytale.io", "password": "s3cret-pass"}
        assert client.post("/auth/login", json=good).status_code == 423
        assert client.get(f"/users/{user_id}").json()["failed_login_attempts"] == 5


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
