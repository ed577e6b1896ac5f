"""Domain repository interface for job applications."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from app.domain.entities.job_application import ApplicationView, JobApplication
from app.domain.value_objects import ApplicationId, JobId, UserId


class IApplicationRepository(ABC):
    """Repository interface for JobApplication aggregate and its read models."""

    @abstractmethod
    async def save(self, application: JobApplication) -> JobApplication:
        """Insert or update. Raises ``ConflictError`` when (user, job) already exists."""
        raise NotImplementedError

    @abstractmethod
    async def get_by_id(self, application_id: ApplicationId) -> Optional[JobApplication]:
        raise NotImplementedError

    @abstractmethod
    async def exists_for(self, user_id: UserId, job_id: JobId) -> bool:
        raise NotImplementedError

    @abstractmethod
    async def list_views_by_user(self, user_id: UserId) -> List[ApplicationView]:
        """Caller's applications newest first, joined with job title and CV filename."""
        raise NotImplementedError

    @abstractmethod
    async def list_all_views(self) -> List[ApplicationView]:
        """All applications newest first, joined with applicant, job and CV."""
        raise NotImplementedError
