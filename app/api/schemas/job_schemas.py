"""Job posting request/response DTOs."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from app.domain.entities.job import Job


class JobCreateRequest(BaseModel):
    title: Optional[str] = Field(None, description="Job title (required)")
    company: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    type: Optional[str] = Field(None, description="Employment type, e.g. full-time")
    requirements: Optional[str] = None


class JobStatusRequest(BaseModel):
    status: Optional[str] = None


class JobResponse(BaseModel):
    id: str
    title: str
    company: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    type: Optional[str] = None
    requirements: Optional[str] = None
    status: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, job: Job) -> "JobResponse":
        return cls(
            id=str(job.id),
            title=job.title,
            company=job.company,
            description=job.description,
            location=job.location,
            type=job.type,
            requirements=job.requirements,
            status=job.status,
            created_at=job.created_at,
            updated_at=job.updated_at,
        )


class JobFilters(BaseModel):
    type: Optional[str] = None
    location: Optional[str] = None


class JobListResponse(BaseModel):
    count: int
    limit: int
    offset: int
    filters: JobFilters
    jobs: List[JobResponse]


class JobMessageResponse(BaseModel):
    message: str
    job: JobResponse


__all__ = [
    "JobCreateRequest",
    "JobFilters",
    "JobListResponse",
    "JobMessageResponse",
    "JobResponse",
    "JobStatusRequest",
]
