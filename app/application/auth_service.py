"""Application service for account registration, login and token handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

import structlog

from app.domain.entities.user import User
from app.domain.exceptions import (
    AuthenticationError,
    ValidationError,
    WeakPasswordError,
)
from app.domain.value_objects import EmailAddress, UserId
from app.utils.security import ACCESS_TOKEN, REFRESH_TOKEN, CurrentUser

if TYPE_CHECKING:
    from app.application.dependencies.auth_dependencies import AuthDependencies


logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class AuthSession:
    """A user together with a freshly issued token pair."""

    user: User
    access_token: str
    refresh_token: str


class AuthApplicationService:
    """Stateless JWT authentication backed by the user repository."""

    def __init__(self, dependencies: AuthDependencies) -> None:
        self._deps = dependencies

    async def register(self, email: Optional[str], password: Optional[str], name: Optional[str] = None) -> AuthSession:
        """
        Create an account and sign it in.

        Raises:
            ValidationError: email or password missing, or email malformed
            WeakPasswordError: password fails the configured policy
            ConflictError: email already registered
        """
        if not email or not password:
            raise ValidationError("Email and password are required")

        check = self._deps.password_manager.validate_password_strength(password)
        if not check["valid"]:
            raise WeakPasswordError("; ".join(check["errors"]))

        try:
            user = User.register(
                email,
                self._deps.password_manager.hash_password(password),
                name=name,
            )
        except ValueError as exc:
            raise ValidationError("Invalid email address") from exc

        user = await self._deps.user_repository.save(user)
        logger.info("User registered", user_id=str(user.id))
        return self._issue(user)

    async def login(self, email: Optional[str], password: Optional[str]) -> AuthSession:
        """
        Raises:
            AuthenticationError: unknown email or wrong password
        """
        if not email or not password:
            raise ValidationError("Email and password are required")

        try:
            address = EmailAddress(email)
        except ValueError as exc:
            raise AuthenticationError("Invalid credentials") from exc

        user = await self._deps.user_repository.get_by_email(address)
        if user is None or not self._deps.password_manager.verify_password(password, user.password_hash):
            logger.warning("Login failed", reason="invalid_credentials")
            raise AuthenticationError("Invalid credentials")

        user.record_login()
        user = await self._deps.user_repository.save(user)
        logger.info("User logged in", user_id=str(user.id))
        return self._issue(user)

    async def refresh(self, refresh_token: Optional[str]) -> str:
        """Exchange a refresh token for a new access token."""
        if not refresh_token:
            raise AuthenticationError("Refresh token missing")

        token_data = self._deps.token_manager.verify_token(refresh_token, expected_type=REFRESH_TOKEN)
        if token_data is None:
            raise AuthenticationError("Invalid refresh token")

        try:
            user_id = UserId(token_data.sub)
        except (TypeError, ValueError) as exc:
            raise AuthenticationError("Invalid refresh token") from exc

        user = await self._deps.user_repository.get_by_id(user_id)
        if user is None:
            raise AuthenticationError("Invalid refresh token")

        return self._deps.token_manager.create_access_token(
            str(user.id), str(user.email), user.role.value
        )

    def authenticate_token(self, token: Optional[str]) -> CurrentUser:
        """Resolve an access token to the calling user without a database hit."""
        if not token:
            raise AuthenticationError("Authentication required")

        token_data = self._deps.token_manager.verify_token(token, expected_type=ACCESS_TOKEN)
        if token_data is None:
            raise AuthenticationError("Invalid or expired token")

        current_user = self._deps.token_manager.token_to_current_user(token_data)
        if current_user is None:
            raise AuthenticationError("Invalid or expired token")
        return current_user

    def _issue(self, user: User) -> AuthSession:
        return AuthSession(
            user=user,
            access_token=self._deps.token_manager.create_access_token(
                str(user.id), str(user.email), user.role.value
            ),
            refresh_token=self._deps.token_manager.create_refresh_token(str(user.id)),
        )


__all__ = ["AuthApplicationService", "AuthSession"]
