"""Tests for the parent shared-secret gate."""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.core.security import extract_bearer_token, verify_parent_secret
from app.utils.exceptions import AuthenticationError, AuthorizationError

SECRET = "letmein"


@pytest.fixture()
def secured_client(make_app):
    with TestClient(make_app(PARENT_AUTH_SECRET=SECRET)) as test_client:
        yield test_client


def test_missing_credentials_return_401(secured_client):
    response = secured_client.get("/api/words")

    assert response.status_code == 401
    assert response.json()["error"] == "Unauthorized"
    assert response.headers["www-authenticate"] == "Bearer"


def test_wrong_secret_returns_403(secured_client):
    response = secured_client.get("/api/words", headers={"Authorization": "Bearer nope"})

    assert response.status_code == 403
    assert response.json()["error"] == "Forbidden"


def test_correct_secret_is_accepted(secured_client):
    response = secured_client.get("/api/words", headers={"Authorization": f"Bearer {SECRET}"})

    assert response.status_code == 200


def test_health_is_open(secured_client):
    response = secured_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_routes_are_open_without_secret(client):
    assert client.get("/api/words").status_code == 200


@pytest.mark.parametrize(
    "header,expected",
    [
        (None, None),
        ("", None),
        ("Bearer abc", "abc"),
        ("bearer  abc ", "abc"),
        ("abc", "abc"),
    ],
)
def test_extract_bearer_token(header, expected):
    assert extract_bearer_token(header) == expected


def test_verify_parent_secret():
    verify_parent_secret(None, None)
    verify_parent_secret("Bearer letmein", SECRET)
    with pytest.raises(AuthenticationError):
        verify_parent_secret(None, SECRET)
    with pytest.raises(AuthorizationError):
        verify_parent_secret("Bearer wrong", SECRET)
