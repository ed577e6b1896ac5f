"""Domain repository interface for uploaded base CVs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from app.domain.entities.cv_document import CVDocument
from app.domain.value_objects import CVId, UserId


class ICVRepository(ABC):
    """Repository interface for CV documents, always scoped to their owner."""

    @abstractmethod
    async def save(self, cv: CVDocument) -> CVDocument:
        raise NotImplementedError

    @abstractmethod
    async def get_for_user(self, cv_id: CVId, user_id: UserId) -> Optional[CVDocument]:
        """Load a CV only if it belongs to ``user_id``."""
        raise NotImplementedError

    @abstractmethod
    async def list_by_user(self, user_id: UserId) -> List[CVDocument]:
        """List a user's CVs, newest first."""
        raise NotImplementedError

    @abstractmethod
    async def delete_for_user(self, cv_id: CVId, user_id: UserId) -> Optional[CVDocument]:
        """Delete an owned CV and return it, or None when nothing matched."""
        raise NotImplementedError
