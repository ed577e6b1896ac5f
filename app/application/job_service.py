"""Application service for job postings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

import structlog

from app.domain.entities.job import Job
from app.domain.exceptions import JobNotFoundError
from app.domain.value_objects import JobId

if TYPE_CHECKING:
    from app.application.dependencies.job_dependencies import JobDependencies


logger = structlog.get_logger(__name__)

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


class JobPostingService:
    """CRUD over job postings."""

    def __init__(self, dependencies: JobDependencies) -> None:
        self._deps = dependencies

    async def list_jobs(
        self,
        *,
        job_type: Optional[str] = None,
        location: Optional[str] = None,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> List[Job]:
        limit = min(max(limit, 1), MAX_PAGE_SIZE)
        offset = max(offset, 0)
        return await self._deps.job_repository.list(
            job_type=job_type or None,
            location=location or None,
            limit=limit,
            offset=offset,
        )

    async def get_job(self, job_id: Any) -> Job:
        job = await self._deps.job_repository.get_by_id(self._parse_id(job_id))
        if job is None:
            raise JobNotFoundError()
        return job

    async def create_job(
        self,
        title: Optional[str],
        *,
        company: Optional[str] = None,
        description: Optional[str] = None,
        location: Optional[str] = None,
        type: Optional[str] = None,
        requirements: Optional[str] = None,
    ) -> Job:
        job = Job.create(
            title,
            company=company,
            description=description,
            location=location,
            type=type,
            requirements=requirements,
        )
        job = await self._deps.job_repository.save(job)
        logger.info("Job created", job_id=str(job.id), title=job.title)
        return job

    async def update_status(self, job_id: Any, status: Optional[str]) -> Job:
        job = await self.get_job(job_id)
        job.change_status(status)
        job = await self._deps.job_repository.save(job)
        logger.info("Job status updated", job_id=str(job.id), status=job.status)
        return job

    async def delete_job(self, job_id: Any) -> Job:
        job = await self._deps.job_repository.delete(self._parse_id(job_id))
        if job is None:
            raise JobNotFoundError()
        logger.info("Job deleted", job_id=str(job.id))
        return job

    @staticmethod
    def _parse_id(job_id: Any) -> JobId:
        try:
            return JobId(job_id)
        except (TypeError, ValueError) as exc:
            raise JobNotFoundError() from exc


__all__ = ["JobPostingService", "DEFAULT_PAGE_SIZE", "MAX_PAGE_SIZE"]
