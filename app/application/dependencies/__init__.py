"""Application service dependencies."""

from .auth_dependencies import AuthDependencies
from .candidate_dependencies import CandidateDependencies
from .cv_dependencies import CVDependencies
from .job_dependencies import JobDependencies
from .tailoring_dependencies import TailoringDependencies

__all__ = [
    "AuthDependencies",
    "CandidateDependencies",
    "CVDependencies",
    "JobDependencies",
    "TailoringDependencies",
]
