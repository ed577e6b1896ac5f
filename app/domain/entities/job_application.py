"""Pure domain representation of job applications."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import uuid4

from app.domain.exceptions import ValidationError
from app.domain.utils import utc_now
from app.domain.value_objects import ApplicationId, CVId, JobId, TailoredCVId, UserId


class ApplicationStatus(str, Enum):
    """Review states an application moves through."""

    PENDING = "pending"
    REVIEWED = "reviewed"
    SHORTLISTED = "shortlisted"
    REJECTED = "rejected"
    HIRED = "hired"

    @classmethod
    def parse(cls, value: Optional[str]) -> "ApplicationStatus":
        try:
            return cls((value or "").strip().lower())
        except ValueError as exc:
            raise ValidationError("Invalid status value") from exc


@dataclass
class JobApplication:
    """A user's application to a job, backed by a CV and optionally a tailored CV."""

    id: ApplicationId
    user_id: UserId
    job_id: JobId
    cv_id: CVId
    tailored_cv_id: Optional[TailoredCVId] = None
    status: ApplicationStatus = ApplicationStatus.PENDING
    applied_at: datetime = field(default_factory=utc_now)
    updated_at: Optional[datetime] = None

    @classmethod
    def submit(
        cls,
        user_id: UserId,
        job_id: JobId,
        cv_id: CVId,
        tailored_cv_id: Optional[TailoredCVId] = None,
    ) -> "JobApplication":
        return cls(
            id=ApplicationId(uuid4()),
            user_id=user_id,
            job_id=job_id,
            cv_id=cv_id,
            tailored_cv_id=tailored_cv_id,
        )

    def change_status(self, status: ApplicationStatus) -> None:
        self.status = status
        self.updated_at = utc_now()


@dataclass(frozen=True)
class ApplicationView:
    """Read model joining an application with its job, CV and applicant."""

    id: ApplicationId
    status: ApplicationStatus
    applied_at: datetime
    job_id: JobId
    job_title: Optional[str]
    cv_id: CVId
    cv_filename: Optional[str]
    tailored_cv_id: Optional[TailoredCVId] = None
    user_id: Optional[UserId] = None
    user_email: Optional[str] = None
    company: Optional[str] = None


__all__ = ["ApplicationStatus", "JobApplication", "ApplicationView"]
