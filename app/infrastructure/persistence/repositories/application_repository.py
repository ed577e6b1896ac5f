"""PostgreSQL implementation of IApplicationRepository."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import desc, select
from sqlalchemy.exc import IntegrityError

from app.database.sqlmodel_engine import SQLModelDatabaseManager
from app.domain.entities.job_application import ApplicationView, JobApplication
from app.domain.exceptions import ConflictError
from app.domain.repositories.application_repository import IApplicationRepository
from app.domain.value_objects import ApplicationId, JobId, UserId
from app.infrastructure.persistence.mappers.application_mapper import ApplicationMapper
from app.infrastructure.persistence.models.application_table import ApplicationTable
from app.infrastructure.persistence.models.auth_tables import UserTable
from app.infrastructure.persistence.models.cv_table import CVTable
from app.infrastructure.persistence.models.job_table import JobTable


class PostgresApplicationRepository(IApplicationRepository):
    """PostgreSQL adapter implementation of IApplicationRepository."""

    def __init__(self, db_manager: SQLModelDatabaseManager):
        self._db = db_manager

    async def save(self, application: JobApplication) -> JobApplication:
        try:
            async with self._db.get_session() as session:
                existing = await session.get(ApplicationTable, application.id.value)
                if existing is None:
                    session.add(ApplicationMapper.to_table(application))
                else:
                    existing.status = application.status.value
                    existing.updated_at = application.updated_at
        except IntegrityError as exc:
            raise ConflictError("You already applied for this job") from exc
        return application

    async def get_by_id(self, application_id: ApplicationId) -> Optional[JobApplication]:
        async with self._db.get_session() as session:
            row = await session.get(ApplicationTable, application_id.value)
        return ApplicationMapper.to_domain(row) if row else None

    async def exists_for(self, user_id: UserId, job_id: JobId) -> bool:
        async with self._db.get_session() as session:
            result = await session.execute(
                select(ApplicationTable.id).where(
                    ApplicationTable.user_id == user_id.value,
                    ApplicationTable.job_id == job_id.value,
                )
            )
            return result.first() is not None

    async def list_views_by_user(self, user_id: UserId) -> List[ApplicationView]:
        async with self._db.get_session() as session:
            result = await session.execute(
                select(ApplicationTable, JobTable.title, JobTable.company, CVTable.filename)
                .outerjoin(JobTable, JobTable.id == ApplicationTable.job_id)
                .outerjoin(CVTable, CVTable.id == ApplicationTable.cv_id)
                .where(ApplicationTable.user_id == user_id.value)
                .order_by(desc(ApplicationTable.applied_at))
            )
            rows = result.all()
        return [
            ApplicationMapper.to_view(
                table, job_title=title, company=company, cv_filename=filename
            )
            for table, title, company, filename in rows
        ]

    async def list_all_views(self) -> List[ApplicationView]:
        async with self._db.get_session() as session:
            result = await session.execute(
                select(
                    ApplicationTable,
                    JobTable.title,
                    JobTable.company,
                    CVTable.filename,
                    UserTable.email,
                )
                .outerjoin(JobTable, JobTable.id == ApplicationTable.job_id)
                .outerjoin(CVTable, CVTable.id == ApplicationTable.cv_id)
                .outerjoin(UserTable, UserTable.id == ApplicationTable.user_id)
                .order_by(desc(ApplicationTable.applied_at))
            )
            rows = result.all()
        return [
            ApplicationMapper.to_view(
                table,
                job_title=title,
                company=company,
                cv_filename=filename,
                user_email=email,
                include_user=True,
            )
            for table, title, company, filename, email in rows
        ]


__all__ = ["PostgresApplicationRepository"]
