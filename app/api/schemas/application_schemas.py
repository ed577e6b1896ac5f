"""Job application DTOs."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.api.schemas.base import APISchema
from app.domain.entities.job_application import ApplicationView, JobApplication


def _optional_str(value) -> Optional[str]:
    return str(value) if value is not None else None


class ApplicationStatusRequest(BaseModel):
    status: Optional[str] = None


class ApplicationResponse(BaseModel):
    id: str
    user_id: str
    job_id: str
    cv_id: str
    tailored_cv_id: Optional[str] = None
    status: str
    applied_at: datetime
    updated_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, application: JobApplication) -> "ApplicationResponse":
        return cls(
            id=str(application.id),
            user_id=str(application.user_id),
            job_id=str(application.job_id),
            cv_id=str(application.cv_id),
            tailored_cv_id=_optional_str(application.tailored_cv_id),
            status=application.status.value,
            applied_at=application.applied_at,
            updated_at=application.updated_at,
        )


class ApplicationMessageResponse(BaseModel):
    message: str
    application: ApplicationResponse


class UserApplicationItem(APISchema):
    """An application as listed to its applicant."""

    id: str
    status: str
    applied_at: datetime = Field(..., alias="appliedAt")
    job_id: str
    job_title: Optional[str] = Field(None, alias="jobTitle")
    company: Optional[str] = None
    cv_id: str
    cv_name: Optional[str] = Field(None, alias="cvName")
    tailored_cv_id: Optional[str] = Field(None, alias="tailoredCvId")

    @classmethod
    def from_view(cls, view: ApplicationView) -> "UserApplicationItem":
        return cls(
            id=str(view.id),
            status=view.status.value,
            applied_at=view.applied_at,
            job_id=str(view.job_id),
            job_title=view.job_title,
            company=view.company,
            cv_id=str(view.cv_id),
            cv_name=view.cv_filename,
            tailored_cv_id=_optional_str(view.tailored_cv_id),
        )


class ApplicantSummary(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None


class JobSummary(BaseModel):
    id: str
    title: Optional[str] = None


class CVSummary(BaseModel):
    id: str
    name: Optional[str] = None


class AdminApplicationItem(APISchema):
    """An application as listed to admins, with applicant, job and CV summaries."""

    id: str
    status: str
    applied_at: datetime = Field(..., alias="appliedAt")
    user: ApplicantSummary
    job: JobSummary
    cv: CVSummary
    tailored_cv_id: Optional[str] = Field(None, alias="tailoredCvId")

    @classmethod
    def from_view(cls, view: ApplicationView) -> "AdminApplicationItem":
        return cls(
            id=str(view.id),
            status=view.status.value,
            applied_at=view.applied_at,
            user=ApplicantSummary(id=_optional_str(view.user_id), name=view.user_email),
            job=JobSummary(id=str(view.job_id), title=view.job_title),
            cv=CVSummary(id=str(view.cv_id), name=view.cv_filename),
            tailored_cv_id=_optional_str(view.tailored_cv_id),
        )


__all__ = [
    "AdminApplicationItem",
    "ApplicationMessageResponse",
    "ApplicationResponse",
    "ApplicationStatusRequest",
    "UserApplicationItem",
]
