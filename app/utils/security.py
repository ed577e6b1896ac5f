"""
Security utilities for authentication and password management
"""

import bcrypt
import jwt
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Dict, Any, Optional
from uuid import uuid4

import structlog
from app.core.config import Settings, get_settings
from app.domain.entities.user import UserRole
from app.domain.value_objects import UserId

logger = structlog.get_logger(__name__)

ACCESS_TOKEN = "access"
REFRESH_TOKEN = "refresh"


@dataclass(frozen=True)
class TokenData:
    """Decoded JWT claims."""

    sub: str
    token_type: str
    exp: int
    iat: int
    email: Optional[str] = None
    role: Optional[str] = None


@dataclass(frozen=True)
class CurrentUser:
    """Authenticated caller resolved from an access token."""

    user_id: UserId
    email: str
    role: UserRole = UserRole.USER

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


class PasswordManager:
    """Password hashing and validation utilities"""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def hash_password(self, password: str) -> str:
        """Hash password with bcrypt"""
        salt = bcrypt.gensalt(rounds=self.settings.BCRYPT_ROUNDS)
        hashed = bcrypt.hashpw(password.encode('utf-8'), salt)
        return hashed.decode('utf-8')

    def verify_password(self, password: str, hashed_password: str) -> bool:
        """Verify password against hash"""
        try:
            return bcrypt.checkpw(
                password.encode('utf-8'),
                hashed_password.encode('utf-8')
            )
        except Exception as e:
            logger.error("Password verification failed", error=str(e))
            return False

    def validate_password_strength(self, password: str) -> Dict[str, Any]:
        """Validate password meets the configured minimum length"""
        errors = []

        if len(password or "") < self.settings.PASSWORD_MIN_LENGTH:
            errors.append(
                f"Password length must be at least {self.settings.PASSWORD_MIN_LENGTH} characters"
            )

        return {
            "valid": len(errors) == 0,
            "errors": errors
        }


class TokenManager:
    """JWT token management utilities"""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def _encode(self, payload: Dict[str, Any]) -> str:
        return jwt.encode(
            payload,
            self.settings.SECRET_KEY,
            algorithm=self.settings.JWT_ALGORITHM
        )

    def create_access_token(
        self,
        user_id: str,
        email: str,
        role: str,
        extra_claims: Optional[Dict[str, Any]] = None
    ) -> str:
        """Create JWT access token"""

        now = datetime.now(timezone.utc)
        expires_at = now + timedelta(minutes=self.settings.ACCESS_TOKEN_EXPIRE_MINUTES)

        payload = {
            "sub": user_id,
            "email": email,
            "role": role,
            "exp": expires_at,
            "iat": now,
            "jti": str(uuid4()),
            "token_type": ACCESS_TOKEN
        }

        if extra_claims:
            payload.update(extra_claims)

        return self._encode(payload)

    def create_refresh_token(self, user_id: str) -> str:
        """Create JWT refresh token"""

        now = datetime.now(timezone.utc)
        expires_at = now + timedelta(days=self.settings.REFRESH_TOKEN_EXPIRE_DAYS)

        payload = {
            "sub": user_id,
            "exp": expires_at,
            "iat": now,
            "jti": str(uuid4()),
            "token_type": REFRESH_TOKEN
        }

        return self._encode(payload)

    def verify_token(self, token: str, expected_type: Optional[str] = None) -> Optional[TokenData]:
        """Verify and decode JWT token; None when invalid, expired or of the wrong type"""
        try:
            payload = jwt.decode(
                token,
                self.settings.SECRET_KEY,
                algorithms=[self.settings.JWT_ALGORITHM]
            )
        except jwt.ExpiredSignatureError:
            logger.warning("Token has expired")
            return None
        except jwt.PyJWTError as e:
            logger.warning("Token validation failed", error=str(e))
            return None

        token_data = self.extract_token_data(payload)
        if token_data is None:
            return None
        if expected_type and token_data.token_type != expected_type:
            logger.warning(
                "Unexpected token type",
                expected=expected_type,
                actual=token_data.token_type
            )
            return None
        return token_data

    def extract_token_data(self, payload: Dict[str, Any]) -> Optional[TokenData]:
        """Extract structured token data from payload"""
        try:
            return TokenData(
                sub=payload["sub"],
                token_type=payload.get("token_type", ACCESS_TOKEN),
                exp=payload["exp"],
                iat=payload["iat"],
                email=payload.get("email"),
                role=payload.get("role"),
            )
        except KeyError as e:
            logger.error("Missing required token field", field=str(e))
            return None

    def token_to_current_user(self, token_data: TokenData) -> Optional[CurrentUser]:
        """Convert access token claims to CurrentUser"""
        try:
            role = UserRole(token_data.role or UserRole.USER.value)
        except ValueError:
            role = UserRole.USER
        try:
            user_id = UserId(token_data.sub)
        except (ValueError, TypeError):
            logger.warning("Token subject is not a user id")
            return None
        return CurrentUser(user_id=user_id, email=token_data.email or "", role=role)


__all__ = [
    "ACCESS_TOKEN",
    "REFRESH_TOKEN",
    "CurrentUser",
    "PasswordManager",
    "TokenData",
    "TokenManager",
]
