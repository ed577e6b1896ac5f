"""
Infrastructure persistence models module.

This module contains database table definitions following hexagonal architecture,
separated from domain models and business logic.
"""

from app.infrastructure.persistence.models.application_table import ApplicationTable
from app.infrastructure.persistence.models.auth_tables import UserTable
from app.infrastructure.persistence.models.candidate_table import CandidateTable
from app.infrastructure.persistence.models.cv_table import CVTable
from app.infrastructure.persistence.models.job_table import JobTable
from app.infrastructure.persistence.models.tailored_cv_table import TailoredCVTable

__all__ = [
    "ApplicationTable",
    "CandidateTable",
    "CVTable",
    "JobTable",
    "TailoredCVTable",
    "UserTable",
]
