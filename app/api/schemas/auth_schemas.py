"""Authentication request/response DTOs."""

from typing import Optional

from pydantic import BaseModel, Field

from app.api.schemas.base import APISchema
from app.domain.entities.user import User


class RegisterRequest(BaseModel):
    email: Optional[str] = Field(None, description="Account email")
    password: Optional[str] = Field(None, description="Plain text password")
    name: Optional[str] = Field(None, description="Display name")


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class RefreshRequest(APISchema):
    refresh_token: Optional[str] = Field(None, alias="refreshToken")


class UserResponse(BaseModel):
    id: str
    email: str
    name: Optional[str] = None
    role: str

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(**user.to_public_dict())


class AuthResponse(APISchema):
    message: str
    user: UserResponse
    access_token: str = Field(..., alias="accessToken")
    refresh_token: str = Field(..., alias="refreshToken")


class AccessTokenResponse(APISchema):
    access_token: str = Field(..., alias="accessToken")


__all__ = [
    "AccessTokenResponse",
    "AuthResponse",
    "LoginRequest",
    "RefreshRequest",
    "RegisterRequest",
    "UserResponse",
]
