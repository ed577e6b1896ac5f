"""Pure domain representation of user accounts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional
from uuid import uuid4

from app.domain.utils import utc_now
from app.domain.value_objects import EmailAddress, UserId


class UserRole(str, Enum):
    """User role types in the system."""

    USER = "user"
    ADMIN = "admin"


@dataclass
class User:
    """Registered account able to upload CVs and apply for jobs."""

    id: UserId
    email: EmailAddress
    password_hash: str
    role: UserRole = UserRole.USER
    name: Optional[str] = None
    created_at: datetime = field(default_factory=utc_now)
    last_login_at: Optional[datetime] = None

    @classmethod
    def register(
        cls,
        email: str,
        password_hash: str,
        *,
        name: Optional[str] = None,
        role: UserRole = UserRole.USER,
    ) -> "User":
        return cls(
            id=UserId(uuid4()),
            email=EmailAddress(email),
            password_hash=password_hash,
            role=role,
            name=name.strip() if name else None,
        )

    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def record_login(self) -> None:
        self.last_login_at = utc_now()

    def to_public_dict(self) -> Dict[str, Any]:
        """Serialisable view without credentials."""
        return {
            "id": str(self.id),
            "email": str(self.email),
            "name": self.name,
            "role": self.role.value,
        }


__all__ = ["User", "UserRole"]
