"""Tests for registration and the authentication token endpoint."""

from __future__ import annotations

from datetime import timedelta

from event_planner.infrastructure.security import create_access_token


def test_register_then_login_with_username_or_email(client, register_and_login) -> None:
    user, headers = register_and_login("alice")

    assert user["username"] == "alice"
    assert "password" not in user

    by_email = client.post(
        "/auth/token", data={"username": "alice@example.com", "password": "Secret123"}
    )
    assert by_email.status_code == 200
    assert by_email.json()["token_type"] == "bearer"

    me = client.get("/users/me", headers=headers)
    assert me.status_code == 200
    assert me.json()["id"] == user["id"]


def test_duplicate_registration_is_a_conflict(client, register_and_login) -> None:
    register_and_login("alice")

    response = client.post(
        "/auth/register",
        json={"username": "alice2", "email": "alice@example.com", "password": "Secret123"},
    )

    assert response.status_code == 409
    assert response.json()["code"] == "EMAIL_TAKEN"


def test_wrong_password_is_rejected(client, register_and_login) -> None:
    register_and_login("alice")

    response = client.post("/auth/token", data={"username": "alice", "password": "nope"})

    assert response.status_code == 401
    assert response.json() == {
        "code": "INVALID_CREDENTIALS",
        "message": "Incorrect username or password",
    }
    assert response.headers["www-authenticate"] == "Bearer"


def test_expired_or_missing_token_is_unauthorized(client, register_and_login) -> None:
    user, _ = register_and_login("alice")
    expired = create_access_token({"sub": str(user["id"])}, expires_delta=timedelta(minutes=-1))

    missing = client.get("/users/me")
    stale = client.get("/users/me", headers={"Authorization": f"Bearer {expired}"})

    assert missing.status_code == 401
    assert missing.json()["code"] == "UNAUTHORIZED"
    assert stale.status_code == 401
    assert stale.json()["code"] == "INVALID_TOKEN"


def test_invalid_registration_payload_uses_error_shape(client) -> None:
    response = client.post(
        "/auth/register",
        json={"username": "al", "email": "not-an-email", "password": "short"},
    )

    assert response.status_code == 422
    body = response.json()
    assert body["code"] == "INVALID_REQUEST"
    assert body["message"]


def test_user_search_is_paginated(client, register_and_login) -> None:
    _, headers = register_and_login("alice")
    for name in ("bob", "bobby", "carol"):
        register_and_login(name)

    first = client.get("/users", params={"q": "bob", "pageSize": 1}, headers=headers)
    second = client.get("/users", params={"q": "bob", "pageSize": 1, "page": 2}, headers=headers)

    assert first.status_code == 200
    assert len(first.json()["items"]) == 1
    assert first.json()["next_page"] == 2
    assert second.json()["next_page"] is None
