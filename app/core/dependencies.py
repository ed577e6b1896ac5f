"""
FastAPI Dependencies
"""

from typing import Annotated, Optional

import structlog
from fastapi import Depends, HTTPException, Query, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.application.auth_service import AuthApplicationService
from app.core.config import Settings, get_settings
from app.domain.exceptions import AuthenticationError
from app.infrastructure.factories.auth_dependency_factory import get_auth_dependencies
from app.utils.security import CurrentUser

logger = structlog.get_logger(__name__)

# Security scheme
security = HTTPBearer(auto_error=False)


# Settings dependency
def get_settings_dependency() -> Settings:
    """Get application settings"""
    return get_settings()


async def get_auth_service() -> AuthApplicationService:
    """Create AuthApplicationService with injected dependencies."""
    dependencies = await get_auth_dependencies()
    return AuthApplicationService(dependencies)


# Authentication dependencies
async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    token: Optional[str] = Query(None, description="Access token for download links"),
    auth_service: AuthApplicationService = Depends(get_auth_service),
) -> CurrentUser:
    """Get current authenticated user from the Bearer header or ``?token=``"""
    raw_token = credentials.credentials if credentials else token

    try:
        return auth_service.authenticate_token(raw_token)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        )


async def require_admin(
    current_user: CurrentUser = Depends(get_current_user),
) -> CurrentUser:
    """Require the admin role"""
    if not current_user.is_admin:
        logger.warning("Admin access denied", user_id=str(current_user.user_id))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access only",
        )
    return current_user


# Type aliases for dependency injection
CurrentUserDep = Annotated[CurrentUser, Depends(get_current_user)]
AdminUserDep = Annotated[CurrentUser, Depends(require_admin)]
SettingsDep = Annotated[Settings, Depends(get_settings_dependency)]
AuthServiceDep = Annotated[AuthApplicationService, Depends(get_auth_service)]


__all__ = [
    "AdminUserDep",
    "AuthServiceDep",
    "CurrentUserDep",
    "SettingsDep",
    "get_auth_service",
    "get_current_user",
    "get_settings_dependency",
    "require_admin",
    "security",
]
