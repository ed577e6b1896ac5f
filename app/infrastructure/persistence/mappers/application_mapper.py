"""Mapper between JobApplication domain entities and ApplicationTable persistence models."""

from __future__ import annotations

from typing import Optional

from app.domain.entities.job_application import (
    ApplicationStatus,
    ApplicationView,
    JobApplication,
)
from app.domain.value_objects import ApplicationId, CVId, JobId, TailoredCVId, UserId
from app.infrastructure.persistence.models.application_table import ApplicationTable


class ApplicationMapper:
    """Maps between JobApplication entities, read views and ApplicationTable rows."""

    @staticmethod
    def to_domain(table: ApplicationTable) -> JobApplication:
        return JobApplication(
            id=ApplicationId(table.id),
            user_id=UserId(table.user_id),
            job_id=JobId(table.job_id),
            cv_id=CVId(table.cv_id),
            tailored_cv_id=TailoredCVId(table.tailored_cv_id) if table.tailored_cv_id else None,
            status=ApplicationStatus(table.status),
            applied_at=table.applied_at,
            updated_at=table.updated_at,
        )

    @staticmethod
    def to_table(entity: JobApplication) -> ApplicationTable:
        return ApplicationTable(
            id=entity.id.value,
            user_id=entity.user_id.value,
            job_id=entity.job_id.value,
            cv_id=entity.cv_id.value,
            tailored_cv_id=entity.tailored_cv_id.value if entity.tailored_cv_id else None,
            status=entity.status.value,
            applied_at=entity.applied_at,
            updated_at=entity.updated_at,
        )

    @staticmethod
    def to_view(
        table: ApplicationTable,
        *,
        job_title: Optional[str],
        company: Optional[str] = None,
        cv_filename: Optional[str],
        user_email: Optional[str] = None,
        include_user: bool = False,
    ) -> ApplicationView:
        return ApplicationView(
            id=ApplicationId(table.id),
            status=ApplicationStatus(table.status),
            applied_at=table.applied_at,
            job_id=JobId(table.job_id),
            job_title=job_title,
            company=company,
            cv_id=CVId(table.cv_id),
            cv_filename=cv_filename,
            tailored_cv_id=TailoredCVId(table.tailored_cv_id) if table.tailored_cv_id else None,
            user_id=UserId(table.user_id) if include_user else None,
            user_email=user_email,
        )


__all__ = ["ApplicationMapper"]
