"""Domain repository interface for job postings."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from app.domain.entities.job import Job
from app.domain.value_objects import JobId


class IJobRepository(ABC):
    """Repository interface for Job aggregate."""

    @abstractmethod
    async def get_by_id(self, job_id: JobId) -> Optional[Job]:
        raise NotImplementedError

    @abstractmethod
    async def list(
        self,
        *,
        job_type: Optional[str] = None,
        location: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Job]:
        """List jobs newest first. A filter also matches rows where the column is NULL."""
        raise NotImplementedError

    @abstractmethod
    async def save(self, job: Job) -> Job:
        """Insert or update a job."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, job_id: JobId) -> Optional[Job]:
        """Delete a job and return it, or None when it did not exist."""
        raise NotImplementedError
