"""Dependency container for the job application service."""

from dataclasses import dataclass

from app.application.cv_service import CVApplicationService
from app.domain.repositories import (
    IApplicationRepository,
    ICVRepository,
    IJobRepository,
    ITailoredCVRepository,
)


@dataclass
class JobApplicationDependencies:
    """Container for job application service dependencies.

    ``cv_service`` handles CVs uploaded together with an application.
    """

    application_repository: IApplicationRepository
    job_repository: IJobRepository
    cv_repository: ICVRepository
    tailored_cv_repository: ITailoredCVRepository
    cv_service: CVApplicationService


__all__ = ["JobApplicationDependencies"]
