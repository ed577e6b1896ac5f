"""Tests for password hashing and JWT handling."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from app.domain.entities.user import UserRole
from app.utils.security import ACCESS_TOKEN, REFRESH_TOKEN, PasswordManager, TokenManager


@pytest.fixture
def token_manager(settings):
    return TokenManager(settings)


class TestPasswordManager:
    def test_hash_and_verify(self, settings):
        manager = PasswordManager(settings)
        hashed = manager.hash_password("secret123")

        assert hashed != "secret123"
        assert manager.verify_password("secret123", hashed)
        assert not manager.verify_password("wrong", hashed)

    def test_verify_against_garbage_hash(self, settings):
        assert PasswordManager(settings).verify_password("secret123", "not-a-hash") is False

    def test_strength_uses_minimum_length(self, settings):
        manager = PasswordManager(settings)

        assert manager.validate_password_strength("x" * settings.PASSWORD_MIN_LENGTH)["valid"]
        result = manager.validate_password_strength("x" * (settings.PASSWORD_MIN_LENGTH - 1))
        assert not result["valid"]
        assert result["errors"]


class TestTokenManager:
    def test_access_token_round_trip(self, token_manager):
        user_id = str(uuid4())
        token = token_manager.create_access_token(user_id, "jane@example.com", "admin")

        data = token_manager.verify_token(token, expected_type=ACCESS_TOKEN)
        current_user = token_manager.token_to_current_user(data)

        assert data.sub == user_id
        assert current_user.role == UserRole.ADMIN
        assert current_user.is_admin

    def test_wrong_token_type(self, token_manager):
        token = token_manager.create_refresh_token(str(uuid4()))

        assert token_manager.verify_token(token, expected_type=ACCESS_TOKEN) is None
        assert token_manager.verify_token(token, expected_type=REFRESH_TOKEN) is not None

    def test_expired_token(self, token_manager, settings):
        past = datetime.now(timezone.utc) - timedelta(hours=2)
        token = jwt.encode(
            {"sub": str(uuid4()), "exp": past, "iat": past, "token_type": ACCESS_TOKEN},
            settings.SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )

        assert token_manager.verify_token(token) is None

    def test_foreign_signature(self, token_manager, settings):
        token = jwt.encode(
            {"sub": str(uuid4()), "exp": datetime.now(timezone.utc) + timedelta(hours=1), "iat": 0},
            "another-secret-key-that-is-long-enough",
            algorithm=settings.JWT_ALGORITHM,
        )

        assert token_manager.verify_token(token) is None

    def test_non_uuid_subject_is_rejected(self, token_manager):
        token = token_manager.create_access_token("legacy-id", "jane@example.com", "user")

        data = token_manager.verify_token(token)

        assert token_manager.token_to_current_user(data) is None
