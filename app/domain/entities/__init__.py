"""Domain entities exposed for application layer use."""

from .candidate import Candidate
from .cv_document import ALLOWED_CV_MIME_TYPES, CVDocument
from .job import Job
from .job_application import ApplicationStatus, ApplicationView, JobApplication
from .tailored_cv import TailoredCV
from .user import User, UserRole

__all__ = [
    "ALLOWED_CV_MIME_TYPES",
    "ApplicationStatus",
    "ApplicationView",
    "CVDocument",
    "Candidate",
    "Job",
    "JobApplication",
    "TailoredCV",
    "User",
    "UserRole",
]
