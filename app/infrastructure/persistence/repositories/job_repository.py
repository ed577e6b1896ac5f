"""PostgreSQL implementation of IJobRepository."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import desc, or_, select

from app.database.sqlmodel_engine import SQLModelDatabaseManager
from app.domain.entities.job import Job
from app.domain.repositories.job_repository import IJobRepository
from app.domain.value_objects import JobId
from app.infrastructure.persistence.mappers.job_mapper import JobMapper
from app.infrastructure.persistence.models.job_table import JobTable


class PostgresJobRepository(IJobRepository):
    """PostgreSQL adapter implementation of IJobRepository."""

    def __init__(self, db_manager: SQLModelDatabaseManager):
        self._db = db_manager

    async def get_by_id(self, job_id: JobId) -> Optional[Job]:
        async with self._db.get_session() as session:
            row = await session.get(JobTable, job_id.value)
        return JobMapper.to_domain(row) if row else None

    async def list(
        self,
        *,
        job_type: Optional[str] = None,
        location: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Job]:
        stmt = select(JobTable)

        # Postings without a type/location still show up under any filter
        if job_type:
            stmt = stmt.where(or_(JobTable.type == job_type, JobTable.type.is_(None)))
        if location:
            stmt = stmt.where(or_(JobTable.location == location, JobTable.location.is_(None)))

        stmt = stmt.order_by(desc(JobTable.created_at)).limit(limit).offset(offset)

        async with self._db.get_session() as session:
            result = await session.execute(stmt)
            rows = result.scalars().all()

        return [JobMapper.to_domain(row) for row in rows]

    async def save(self, job: Job) -> Job:
        async with self._db.get_session() as session:
            existing = await session.get(JobTable, job.id.value)
            if existing is None:
                session.add(JobMapper.to_table(job))
            else:
                JobMapper.update_table(existing, job)
        return job

    async def delete(self, job_id: JobId) -> Optional[Job]:
        async with self._db.get_session() as session:
            row = await session.get(JobTable, job_id.value)
            if row is None:
                return None
            job = JobMapper.to_domain(row)
            await session.delete(row)
        return job


__all__ = ["PostgresJobRepository"]
