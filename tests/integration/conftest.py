"""
Fixtures for API integration tests.
Use cases are mocked; the auth gate runs the real token check.
"""
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from devconnect.application.use_cases.auth.authenticate_token import AuthenticateTokenUseCase
from devconnect.core.security import create_jwt_token

CONTROLLER_MODULES = (
    "devconnect.api.v1.dependencies",
    "devconnect.api.v1.auth_controller",
    "devconnect.api.v1.users_controller",
    "devconnect.api.v1.post_controller",
    "devconnect.api.v1.profile_controller",
)


@pytest.fixture
def use_cases():
    """Use case class -> mock; tests add the mocks they need."""
    return {AuthenticateTokenUseCase: AuthenticateTokenUseCase()}


@pytest.fixture
def mock_container(use_cases):
    container = MagicMock()
    container.get.side_effect = lambda cls: use_cases.get(cls)
    return container


@pytest.fixture
def client(mock_container):
    """Create test client with mocked container."""
    from contextlib import ExitStack
    from devconnect.main import app

    with ExitStack() as stack:
        for module in CONTROLLER_MODULES:
            stack.enter_context(patch(f"{module}.get_container", return_value=mock_container))
        with TestClient(app) as c:
            yield c


@pytest.fixture
def auth_headers():
    token = create_jwt_token({"sub": "usr-1"})
    return {"Authorization": f"Bearer {token}"}
