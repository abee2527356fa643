"""
Tests for authentication: token helpers, /auth endpoints and route guards.

Run: python3 -m pytest auth/__tests__/test_auth.py -v
"""
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from unittest.mock import patch

import pytest
from jose import jwt

from auth.utils import (
    create_access_token,
    create_user_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from config.settings import settings
from utils.errors import UnauthorizedError


class TestTokens:

    def test_user_token_payload(self):
        payload = decode_access_token(create_user_token("u1", True))

        assert payload["sub"] == "u1"
        assert payload["username"] == "u1"
        assert payload["isAdmin"] is True
        assert "exp" in payload

    def test_expired_token_rejected(self):
        token = create_access_token({"username": "u1"}, expires_delta=timedelta(hours=-1))

        with pytest.raises(UnauthorizedError):
            decode_access_token(token)

    def test_wrong_signature_rejected(self):
        token = jwt.encode(
            {"username": "u1", "isAdmin": True,
             "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
            "some-other-secret",
            algorithm=settings.ALGORITHM,
        )

        with pytest.raises(UnauthorizedError):
            decode_access_token(token)


class TestPasswords:

    def test_hash_and_verify(self):
        hashed = hash_password("password1")

        assert hashed != "password1"
        assert verify_password("password1", hashed)
        assert not verify_password("wrong", hashed)


class TestLogin:

    def test_works(self, client):
        user = SimpleNamespace(username="u1", is_admin=False)

        with patch("auth.routes.authenticate_user", return_value=user):
            resp = client.post("/auth/token", json={"username": "u1", "password": "password1"})

        assert resp.status_code == 200
        payload = decode_access_token(resp.json()["token"])
        assert payload["username"] == "u1"
        assert payload["isAdmin"] is False

    def test_wrong_password(self, client):
        with patch("auth.routes.authenticate_user", return_value=None):
            resp = client.post("/auth/token", json={"username": "u1", "password": "nope"})

        assert resp.status_code == 401
        assert resp.json() == {"error": {"message": "Invalid username/password", "status": 401}}

    def test_missing_password(self, client):
        resp = client.post("/auth/token", json={"username": "u1"})
        assert resp.status_code == 400


class TestRegister:

    new_user = {
        "username": "new",
        "firstName": "first",
        "lastName": "last",
        "password": "password",
        "email": "new@email.com",
    }

    def test_works_for_anon(self, client, mock_db):
        user = SimpleNamespace(username="new", is_admin=False)

        with patch("auth.routes.get_user", return_value=None), \
                patch("auth.routes.register_user", return_value=user) as register:
            resp = client.post("/auth/register", json=self.new_user)

        assert resp.status_code == 201
        assert decode_access_token(resp.json()["token"])["username"] == "new"
        assert register.call_args.kwargs["is_admin"] is False

    def test_cannot_register_as_admin(self, client):
        resp = client.post("/auth/register", json={**self.new_user, "isAdmin": True})
        assert resp.status_code == 400

    def test_duplicate(self, client):
        with patch("auth.routes.get_user", return_value=SimpleNamespace(username="new")):
            resp = client.post("/auth/register", json=self.new_user)

        assert resp.status_code == 400
        assert resp.json()["error"]["message"] == "Duplicate username: new"


class TestCurrentUser:

    def test_with_valid_jwt(self, client, user_headers):
        resp = client.get("/api/user", headers=user_headers)

        assert resp.status_code == 200
        assert resp.json() == {"username": "u1", "isAdmin": False}

    def test_no_auth(self, client):
        resp = client.get("/api/user")

        assert resp.status_code == 401
        assert resp.json() == {"error": {"message": "Unauthorized", "status": 401}}

    def test_expired_jwt_treated_as_anon(self, client):
        token = create_access_token({"username": "u1"}, expires_delta=timedelta(hours=-1))
        resp = client.get("/api/user", headers={"Authorization": f"Bearer {token}"})

        assert resp.status_code == 401


def test_health_check(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


def test_unknown_route_uses_error_envelope(client):
    resp = client.get("/no-such-route")

    assert resp.status_code == 404
    assert resp.json() == {"error": {"message": "Not Found", "status": 404}}
