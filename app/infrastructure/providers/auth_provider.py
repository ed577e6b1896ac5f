"""Authentication provider utilities."""

from __future__ import annotations

from functools import lru_cache

from app.utils.security import PasswordManager, TokenManager


@lru_cache()
def get_password_manager() -> PasswordManager:
    return PasswordManager()


@lru_cache()
def get_token_manager() -> TokenManager:
    return TokenManager()


def reset_auth_providers() -> None:
    get_password_manager.cache_clear()
    get_token_manager.cache_clear()


__all__ = ["get_password_manager", "get_token_manager", "reset_auth_providers"]
