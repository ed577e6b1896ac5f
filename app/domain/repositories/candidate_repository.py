"""Domain repository interface for candidates."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from app.domain.entities.candidate import Candidate
from app.domain.value_objects import CandidateId, EmailAddress


class ICandidateRepository(ABC):

    @abstractmethod
    async def save(self, candidate: Candidate) -> Candidate:
        """Insert a candidate. Raises ``ConflictError`` on a duplicate email."""
        raise NotImplementedError

    @abstractmethod
    async def get_by_id(self, candidate_id: CandidateId) -> Optional[Candidate]:
        raise NotImplementedError

    @abstractmethod
    async def get_by_email(self, email: EmailAddress) -> Optional[Candidate]:
        raise NotImplementedError

    @abstractmethod
    async def list(self) -> List[Candidate]:
        """List candidates newest first."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, candidate_id: CandidateId) -> bool:
        raise NotImplementedError
