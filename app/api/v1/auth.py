"""
Authentication API Endpoints

- User registration and login
- Access token refresh
- Logout
"""

import structlog
from fastapi import APIRouter, HTTPException, Request, status

from app.api.dependencies import map_domain_exception_to_http
from app.api.schemas.auth_schemas import (
    AccessTokenResponse,
    AuthResponse,
    LoginRequest,
    RefreshRequest,
    RegisterRequest,
    UserResponse,
)
from app.api.schemas.base import MessageResponse
from app.application.auth_service import AuthSession
from app.core.dependencies import AuthServiceDep, CurrentUserDep
from app.domain.exceptions import DomainException

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"])


def _auth_response(message: str, session: AuthSession) -> AuthResponse:
    return AuthResponse(
        message=message,
        user=UserResponse.from_domain(session.user),
        access_token=session.access_token,
        refresh_token=session.refresh_token,
    )


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register new user",
)
async def register_user(
    payload: RegisterRequest,
    request: Request,
    auth_service: AuthServiceDep,
):
    """Register a new user account and sign it in"""
    try:
        session = await auth_service.register(payload.email, payload.password, payload.name)
    except DomainException as domain_exc:
        logger.warning(
            "Registration rejected",
            error=str(domain_exc),
            ip_address=request.client.host if request.client else "unknown",
        )
        raise map_domain_exception_to_http(domain_exc)
    except Exception as e:
        logger.error("User registration system failure", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Registration failed due to system error",
        )

    return _auth_response("User registered successfully", session)


@router.post("/login", response_model=AuthResponse, summary="User login")
async def login(
    payload: LoginRequest,
    request: Request,
    auth_service: AuthServiceDep,
):
    """Authenticate user and return tokens"""
    try:
        session = await auth_service.login(payload.email, payload.password)
    except DomainException as domain_exc:
        logger.warning(
            "Login rejected",
            ip_address=request.client.host if request.client else "unknown",
        )
        raise map_domain_exception_to_http(domain_exc)
    except Exception as e:
        logger.error("Login system failure", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Login failed due to system error",
        )

    return _auth_response("Login successful", session)


@router.post("/refresh", response_model=AccessTokenResponse, summary="Refresh access token")
async def refresh_token(payload: RefreshRequest, auth_service: AuthServiceDep):
    try:
        access_token = await auth_service.refresh(payload.refresh_token)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except Exception as e:
        logger.error("Token refresh failure", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Token refresh failed",
        )

    return AccessTokenResponse(access_token=access_token)


@router.post("/logout", response_model=MessageResponse, summary="User logout")
async def logout(current_user: CurrentUserDep):
    """Tokens are stateless; the client discards them."""
    logger.info("User logged out", user_id=str(current_user.user_id))
    return MessageResponse(message="Logged out successfully")
