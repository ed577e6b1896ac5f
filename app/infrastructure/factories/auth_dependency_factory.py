"""Concrete factory for creating AuthApplicationService dependencies."""

from __future__ import annotations

from app.application.dependencies.auth_dependencies import AuthDependencies
from app.infrastructure.providers.auth_provider import get_password_manager, get_token_manager
from app.infrastructure.providers.repository_provider import get_user_repository


async def get_auth_dependencies() -> AuthDependencies:
    return AuthDependencies(
        user_repository=await get_user_repository(),
        password_manager=get_password_manager(),
        token_manager=get_token_manager(),
    )


__all__ = ["get_auth_dependencies"]
