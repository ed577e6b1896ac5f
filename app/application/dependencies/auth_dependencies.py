"""Dependency container for the authentication application service."""

from dataclasses import dataclass

from app.domain.repositories import IUserRepository
from app.utils.security import PasswordManager, TokenManager


@dataclass
class AuthDependencies:
    """Container for authentication service dependencies."""

    user_repository: IUserRepository
    password_manager: PasswordManager
    token_manager: TokenManager


__all__ = ["AuthDependencies"]
