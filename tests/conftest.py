"""
Shared pytest fixtures for devconnect tests.
"""
import os
from unittest.mock import MagicMock, patch

import pytest


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_devconnect_db",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "BCRYPT_ROUNDS": "4",
        "CORS_ORIGINS": "http://localhost:3000, http://localhost:5173",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 1440
    mock.bcrypt_rounds = 4
    mock.cors_origins = ["http://localhost:3000"]
    mock.log_level = "INFO"

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("devconnect.core.config.get_settings", return_value=mock), patch(
        "devconnect.core.security.get_settings", return_value=mock
    ):
        yield mock
