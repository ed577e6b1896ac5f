"""Mappers between domain entities and SQLModel persistence tables."""

from .application_mapper import ApplicationMapper
from .candidate_mapper import CandidateMapper
from .cv_mapper import CVMapper
from .job_mapper import JobMapper
from .tailored_cv_mapper import TailoredCVMapper
from .user_mapper import UserMapper

__all__ = [
    "ApplicationMapper",
    "CandidateMapper",
    "CVMapper",
    "JobMapper",
    "TailoredCVMapper",
    "UserMapper",
]
