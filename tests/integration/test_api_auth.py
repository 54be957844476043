"""
Integration tests for user and auth API endpoints.
Uses TestClient with mocked use cases (no real DB).
Note: Runs full app lifespan (slower). Use: pytest tests/unit/ for fast unit-only runs.
"""
from unittest.mock import AsyncMock

import pytest

pytestmark = pytest.mark.integration

from devconnect.application.dto.auth_dto import TokenResponse
from devconnect.application.dto.user_dto import UserResponse
from devconnect.application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from devconnect.application.use_cases.auth.login_user import LoginUserUseCase
from devconnect.application.use_cases.auth.register_user import RegisterUserUseCase
from devconnect.core.security import create_jwt_token
from devconnect.domain.exceptions import AuthenticationError, ConflictError


@pytest.fixture
def mock_register_use_case(use_cases):
    uc = AsyncMock(spec=RegisterUserUseCase)
    use_cases[RegisterUserUseCase] = uc
    return uc


@pytest.fixture
def mock_login_use_case(use_cases):
    uc = AsyncMock(spec=LoginUserUseCase)
    use_cases[LoginUserUseCase] = uc
    return uc


@pytest.fixture
def mock_current_user_use_case(use_cases):
    uc = AsyncMock(spec=GetCurrentUserUseCase)
    use_cases[GetCurrentUserUseCase] = uc
    return uc


class TestRegisterAPI:
    """Tests for POST /api/v1/users"""

    def test_register_success(self, client, mock_register_use_case):
        mock_register_use_case.execute.return_value = TokenResponse(access_token="jwt.token.here")
        response = client.post(
            "/api/v1/users",
            json={"name": "Test User", "email": "test@example.com", "password": "password123"},
        )
        assert response.status_code == 201
        assert response.json()["access_token"] == "jwt.token.here"

    def test_register_duplicate_returns_400(self, client, mock_register_use_case):
        mock_register_use_case.execute.side_effect = ConflictError("User already exists")
        response = client.post(
            "/api/v1/users",
            json={"name": "Test", "email": "existing@example.com", "password": "password123"},
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "User already exists"

    def test_register_invalid_body_lists_fields(self, client, mock_register_use_case):
        response = client.post(
            "/api/v1/users",
            json={"name": "Test", "email": "not-an-email", "password": "123"},
        )
        assert response.status_code == 400
        params = {error["param"] for error in response.json()["errors"]}
        assert params == {"email", "password"}
        mock_register_use_case.execute.assert_not_called()


class TestAuthAPI:
    """Tests for /api/v1/auth"""

    def test_login_success(self, client, mock_login_use_case):
        mock_login_use_case.execute.return_value = TokenResponse(access_token="jwt.token.here")
        response = client.post(
            "/api/v1/auth",
            json={"email": "test@example.com", "password": "validpass123"},
        )
        assert response.status_code == 200
        assert response.json()["access_token"] == "jwt.token.here"

    def test_login_invalid_returns_401(self, client, mock_login_use_case):
        mock_login_use_case.execute.side_effect = AuthenticationError("Invalid credentials")
        response = client.post(
            "/api/v1/auth",
            json={"email": "test@example.com", "password": "wrongpass123"},
        )
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid credentials"
        assert response.headers["www-authenticate"] == "Bearer"

    def test_current_user(self, client, auth_headers, mock_current_user_use_case):
        mock_current_user_use_case.execute.return_value = UserResponse(
            id="usr-1", name="Test User", email="test@example.com"
        )
        response = client.get("/api/v1/auth", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["email"] == "test@example.com"
        assert "password" not in response.json()
        mock_current_user_use_case.execute.assert_awaited_once_with("usr-1")

    def test_legacy_token_header(self, client, mock_current_user_use_case):
        mock_current_user_use_case.execute.return_value = UserResponse(
            id="usr-2", name="Legacy", email="legacy@example.com"
        )
        token = create_jwt_token({"sub": "usr-2"})
        response = client.get("/api/v1/auth", headers={"x-auth-token": token})
        assert response.status_code == 200
        mock_current_user_use_case.execute.assert_awaited_once_with("usr-2")

    def test_missing_token_returns_401(self, client, mock_current_user_use_case):
        response = client.get("/api/v1/auth")
        assert response.status_code == 401
        assert response.json()["detail"] == "No token, authorization denied"
        mock_current_user_use_case.execute.assert_not_called()

    def test_invalid_token_returns_401(self, client, mock_current_user_use_case):
        response = client.get("/api/v1/auth", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 401
        assert response.json()["detail"] == "Token is not valid"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_shutdown_closes_database_and_resets_container():
    from unittest.mock import patch
    from fastapi.testclient import TestClient
    from devconnect.main import app

    with patch("devconnect.main.close_database") as close, \
            patch("devconnect.main.reset_container") as reset:
        with TestClient(app):
            reset.assert_not_called()
        close.assert_called_once()
        reset.assert_called_once()
