"""Tests for the /v1/auth routes."""

from __future__ import annotations

from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from car_catalog.domain.errors import ConflictError, UnauthorizedError, ValidationError
from car_catalog.domain.user import AuthSession, User
from car_catalog.entrypoints.http.dependencies import (
    get_current_user,
    get_optional_user,
    get_sign_in_use_case,
    get_sign_out_use_case,
    get_sign_up_use_case,
)
from car_catalog.entrypoints.http.exception_handlers import register_exception_handlers
from car_catalog.entrypoints.http.routes.auth import router

USER = User(uid="u-1", email="driver@example.com")
SESSION = AuthSession(token="tok-123", user=USER)
CREDENTIALS = {"email": "driver@example.com", "password": "hunter22"}


@pytest.fixture
def app() -> FastAPI:
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/v1")
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def mock_use_case() -> Mock:
    return Mock()


# ==============================================================================
# Sign up / sign in
# ==============================================================================


def test_signup_returns_session(app: FastAPI, client: TestClient, mock_use_case: Mock) -> None:
    mock_use_case.execute.return_value = SESSION
    app.dependency_overrides[get_sign_up_use_case] = lambda: mock_use_case

    response = client.post("/v1/auth/signup", json=CREDENTIALS)

    assert response.status_code == 201
    assert response.json() == {"token": "tok-123", "uid": "u-1", "email": "driver@example.com"}
    request = mock_use_case.execute.call_args[0][0]
    assert (request.email, request.password) == ("driver@example.com", "hunter22")


def test_signup_duplicate_is_409(app: FastAPI, client: TestClient, mock_use_case: Mock) -> None:
    mock_use_case.execute.side_effect = ConflictError("An account with this email already exists")
    app.dependency_overrides[get_sign_up_use_case] = lambda: mock_use_case

    assert client.post("/v1/auth/signup", json=CREDENTIALS).status_code == 409


def test_signup_invalid_credentials_is_422(
    app: FastAPI, client: TestClient, mock_use_case: Mock
) -> None:
    mock_use_case.execute.side_effect = ValidationError(
        errors=[{"field": "password", "message": "Too short", "code": "TOO_SHORT"}]
    )
    app.dependency_overrides[get_sign_up_use_case] = lambda: mock_use_case

    response = client.post("/v1/auth/signup", json={"email": "x@y.co", "password": "abc"})

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "password"


@pytest.mark.parametrize(
    "email", ["john..doe@example.com", ".lead@example.com", "x@-bad-.com", "no-at-sign.com"]
)
def test_signup_malformed_email_is_rejected_before_use_case(
    app: FastAPI, client: TestClient, mock_use_case: Mock, email: str
) -> None:
    app.dependency_overrides[get_sign_up_use_case] = lambda: mock_use_case

    response = client.post("/v1/auth/signup", json={"email": email, "password": "secret1"})

    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION_ERROR"
    assert response.json()["errors"][0]["field"] == "email"
    mock_use_case.execute.assert_not_called()


def test_login_returns_session(app: FastAPI, client: TestClient, mock_use_case: Mock) -> None:
    mock_use_case.execute.return_value = SESSION
    app.dependency_overrides[get_sign_in_use_case] = lambda: mock_use_case

    response = client.post("/v1/auth/login", json=CREDENTIALS)

    assert response.status_code == 200
    assert response.json()["token"] == "tok-123"


def test_login_wrong_password_is_401(
    app: FastAPI, client: TestClient, mock_use_case: Mock
) -> None:
    mock_use_case.execute.side_effect = UnauthorizedError("Invalid email or password")
    app.dependency_overrides[get_sign_in_use_case] = lambda: mock_use_case

    response = client.post("/v1/auth/login", json=CREDENTIALS)

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid email or password"


# ==============================================================================
# Sign out / current user
# ==============================================================================


def test_logout_revokes_bearer_token(
    app: FastAPI, client: TestClient, mock_use_case: Mock
) -> None:
    app.dependency_overrides[get_sign_out_use_case] = lambda: mock_use_case

    response = client.post("/v1/auth/logout", headers={"Authorization": "Bearer tok-123"})

    assert response.status_code == 204
    mock_use_case.execute.assert_called_once_with("tok-123")


def test_logout_without_token_is_noop(
    app: FastAPI, client: TestClient, mock_use_case: Mock
) -> None:
    app.dependency_overrides[get_sign_out_use_case] = lambda: mock_use_case

    response = client.post("/v1/auth/logout")

    assert response.status_code == 204
    mock_use_case.execute.assert_not_called()


def test_me_returns_current_user(app: FastAPI, client: TestClient) -> None:
    app.dependency_overrides[get_current_user] = lambda: USER

    response = client.get("/v1/auth/me")

    assert response.status_code == 200
    assert response.json() == {"uid": "u-1", "email": "driver@example.com"}


def test_me_without_session_is_401(app: FastAPI, client: TestClient) -> None:
    app.dependency_overrides[get_optional_user] = lambda: None

    response = client.get("/v1/auth/me")

    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"
