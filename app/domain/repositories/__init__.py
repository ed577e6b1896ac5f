"""Domain repository abstractions."""

from .application_repository import IApplicationRepository
from .candidate_repository import ICandidateRepository
from .cv_repository import ICVRepository
from .job_repository import IJobRepository
from .tailored_cv_repository import ITailoredCVRepository
from .user_repository import IUserRepository

__all__ = [
    "IApplicationRepository",
    "ICandidateRepository",
    "ICVRepository",
    "IJobRepository",
    "ITailoredCVRepository",
    "IUserRepository",
]
