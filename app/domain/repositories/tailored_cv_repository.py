"""Domain repository interface for tailoring outcomes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from app.domain.entities.tailored_cv import TailoredCV
from app.domain.value_objects import CVId, JobId, TailoredCVId, UserId


class ITailoredCVRepository(ABC):
    """Persistence contract for TailoredCV outcomes keyed by (owner, base CV, job)."""

    @abstractmethod
    async def get_for_triple(
        self,
        user_id: UserId,
        cv_id: CVId,
        job_id: JobId,
    ) -> Optional[TailoredCV]:
        """Load the outcome for an exact (owner, base CV, job) triple."""
        raise NotImplementedError

    @abstractmethod
    async def upsert(self, tailored_cv: TailoredCV) -> TailoredCV:
        """Insert the outcome, or update the existing row for its triple in place.

        Returns the persisted outcome; on conflict its identity and
        ``created_at`` are those of the existing row.
        """
        raise NotImplementedError

    @abstractmethod
    async def get_for_user(
        self,
        tailored_cv_id: TailoredCVId,
        user_id: UserId,
    ) -> Optional[TailoredCV]:
        raise NotImplementedError

    @abstractmethod
    async def list_by_user(self, user_id: UserId) -> List[TailoredCV]:
        """List a user's outcomes newest first, with ``job_title`` populated."""
        raise NotImplementedError
