"""PostgreSQL repository adapters implementing the domain repository contracts."""

from .application_repository import PostgresApplicationRepository
from .candidate_repository import PostgresCandidateRepository
from .cv_repository import PostgresCVRepository
from .job_repository import PostgresJobRepository
from .tailored_cv_repository import PostgresTailoredCVRepository
from .user_repository import PostgresUserRepository

__all__ = [
    "PostgresApplicationRepository",
    "PostgresCandidateRepository",
    "PostgresCVRepository",
    "PostgresJobRepository",
    "PostgresTailoredCVRepository",
    "PostgresUserRepository",
]
