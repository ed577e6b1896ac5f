"""Concrete factory for creating JobApplicationService dependencies."""

from __future__ import annotations

from app.application.cv_service import CVApplicationService
from app.application.dependencies.job_application_dependencies import (
    JobApplicationDependencies,
)
from app.infrastructure.factories.cv_dependency_factory import get_cv_dependencies
from app.infrastructure.providers.repository_provider import (
    get_application_repository,
    get_cv_repository,
    get_job_repository,
    get_tailored_cv_repository,
)


async def get_job_application_dependencies() -> JobApplicationDependencies:
    """Construct dependencies for applications; CV uploads reuse the CV service."""
    return JobApplicationDependencies(
        application_repository=await get_application_repository(),
        job_repository=await get_job_repository(),
        cv_repository=await get_cv_repository(),
        tailored_cv_repository=await get_tailored_cv_repository(),
        cv_service=CVApplicationService(await get_cv_dependencies()),
    )


__all__ = ["get_job_application_dependencies"]
