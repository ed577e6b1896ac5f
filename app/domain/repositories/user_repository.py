"""Domain repository interface for User aggregates."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.entities.user import User
from app.domain.value_objects import EmailAddress, UserId


class IUserRepository(ABC):
    """Repository interface for User aggregate."""

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert or update a user."""
        raise NotImplementedError

    @abstractmethod
    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        """Get a user by ID."""
        raise NotImplementedError

    @abstractmethod
    async def get_by_email(self, email: EmailAddress) -> Optional[User]:
        """Get a user by (normalised) email."""
        raise NotImplementedError
