"""Application service for applying to jobs and reviewing applications."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

import structlog

from app.application.cv_service import UploadedFile
from app.domain.entities.job_application import (
    ApplicationStatus,
    ApplicationView,
    JobApplication,
)
from app.domain.exceptions import (
    ApplicationNotFoundError,
    AuthorizationError,
    ConflictError,
    CVNotFoundError,
    JobNotFoundError,
    ValidationError,
)
from app.domain.value_objects import ApplicationId, CVId, JobId, TailoredCVId, UserId

if TYPE_CHECKING:
    from app.application.dependencies.job_application_dependencies import (
        JobApplicationDependencies,
    )


logger = structlog.get_logger(__name__)


class JobApplicationService:
    """One application per (user, job), backed by a base CV and optionally a tailored CV."""

    def __init__(self, dependencies: JobApplicationDependencies) -> None:
        self._deps = dependencies

    async def apply(
        self,
        user_id: UserId,
        job_id: Any,
        *,
        upload: Optional[UploadedFile] = None,
        cv_id: Optional[Any] = None,
        tailored_cv_id: Optional[Any] = None,
    ) -> JobApplication:
        """
        Submit an application with a fresh upload or an existing CV.

        Raises:
            JobNotFoundError: unknown job
            ConflictError: the user already applied for the job
            AuthorizationError: ``tailored_cv_id`` is not the caller's
            ValidationError: neither a file nor ``cv_id`` was given
        """
        job_ref = self._parse(JobId, job_id, JobNotFoundError())
        job = await self._deps.job_repository.get_by_id(job_ref)
        if job is None:
            raise JobNotFoundError()

        if await self._deps.application_repository.exists_for(user_id, job.id):
            raise ConflictError("You already applied for this job")

        tailored_ref = None
        if tailored_cv_id:
            tailored_ref = self._parse(
                TailoredCVId, tailored_cv_id, AuthorizationError("Invalid tailored CV")
            )
            tailored = await self._deps.tailored_cv_repository.get_for_user(tailored_ref, user_id)
            if tailored is None:
                raise AuthorizationError("Invalid tailored CV")

        if upload is not None:
            cv = await self._deps.cv_service.upload(user_id, upload)
        elif cv_id:
            cv = await self._deps.cv_repository.get_for_user(
                self._parse(CVId, cv_id, CVNotFoundError()), user_id
            )
            if cv is None:
                raise CVNotFoundError()
        else:
            raise ValidationError("CV file or cv_id is required")

        application = JobApplication.submit(user_id, job.id, cv.id, tailored_ref)
        application = await self._deps.application_repository.save(application)

        logger.info(
            "Application submitted",
            application_id=str(application.id),
            job_id=str(job.id),
            user_id=str(user_id),
            tailored=tailored_ref is not None,
        )
        return application

    async def list_for_user(self, user_id: UserId) -> List[ApplicationView]:
        return await self._deps.application_repository.list_views_by_user(user_id)

    async def list_all(self) -> List[ApplicationView]:
        return await self._deps.application_repository.list_all_views()

    async def update_status(self, application_id: Any, status: Optional[str]) -> JobApplication:
        new_status = ApplicationStatus.parse(status)
        application = await self._deps.application_repository.get_by_id(
            self._parse(ApplicationId, application_id, ApplicationNotFoundError())
        )
        if application is None:
            raise ApplicationNotFoundError()

        application.change_status(new_status)
        application = await self._deps.application_repository.save(application)
        logger.info(
            "Application status updated",
            application_id=str(application.id),
            status=new_status.value,
        )
        return application

    @staticmethod
    def _parse(id_type, value: Any, error: Exception):
        try:
            return id_type(value)
        except (TypeError, ValueError) as exc:
            raise error from exc


__all__ = ["JobApplicationService"]
