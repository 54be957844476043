"""
Unit tests for devconnect.core.security
"""
import hashlib

import pytest
from devconnect.core.security import (
    hash_password,
    verify_password,
    create_jwt_token,
    decode_jwt_token,
    gravatar_url,
)


class TestHashPassword:
    """Tests for hash_password"""

    def test_returns_non_empty_string(self, mock_settings):
        result = hash_password("mypassword")
        assert isinstance(result, str)
        assert len(result) > 0

    def test_different_salts_per_call(self, mock_settings):
        """Each hash should use a new salt, so hashes differ."""
        h1 = hash_password("same")
        h2 = hash_password("same")
        assert h1 != h2

    def test_hash_not_equal_to_plain(self, mock_settings):
        result = hash_password("secret123")
        assert result != "secret123"

    def test_uses_configured_rounds(self, mock_settings):
        # bcrypt hashes look like $2b$<rounds>$...
        assert hash_password("secret123").split("$")[2] == "04"


class TestVerifyPassword:
    """Tests for verify_password"""

    def test_matching_password_returns_true(self, mock_settings):
        hashed = hash_password("correct")
        assert verify_password("correct", hashed) is True

    def test_wrong_password_returns_false(self, mock_settings):
        hashed = hash_password("correct")
        assert verify_password("wrong", hashed) is False

    def test_malformed_hash_returns_false(self):
        assert verify_password("anything", "not-a-bcrypt-hash") is False


class TestJwtToken:
    """Tests for create_jwt_token and decode_jwt_token"""

    def test_create_and_decode_roundtrip(self, mock_settings):
        payload = {"sub": "user-123", "email": "test@example.com"}
        token = create_jwt_token(payload)
        decoded = decode_jwt_token(token)
        assert decoded["sub"] == "user-123"
        assert decoded["email"] == "test@example.com"
        assert decoded["exp"] - decoded["iat"] == 1440 * 60

    def test_decode_invalid_token_raises(self, mock_settings):
        with pytest.raises(ValueError) as exc_info:
            decode_jwt_token("invalid.jwt.token")
        assert "Invalid token" in str(exc_info.value)

    def test_decode_tampered_token_raises(self, mock_settings):
        token = create_jwt_token({"sub": "user-1"})
        tampered = token[:-5] + "xxxxx"
        with pytest.raises(ValueError):
            decode_jwt_token(tampered)

    def test_decode_expired_token_raises(self, mock_settings):
        mock_settings.access_token_expire_minutes = -1
        token = create_jwt_token({"sub": "user-1"})
        with pytest.raises(ValueError, match="Invalid token"):
            decode_jwt_token(token)


class TestGravatarUrl:
    """Tests for gravatar_url"""

    def test_hashes_normalized_email(self):
        digest = hashlib.md5(b"dev@example.com").hexdigest()
        url = gravatar_url("  Dev@Example.com ")
        assert url == f"https://www.gravatar.com/avatar/{digest}?s=200&r=pg&d=mm"

    def test_same_address_same_url(self):
        assert gravatar_url("a@b.io") == gravatar_url("A@B.IO")
