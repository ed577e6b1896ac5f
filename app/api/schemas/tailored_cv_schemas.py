"""
Tailored CV API Schemas - DTOs for the tailoring endpoints.

Wire names follow the established client contract, which mixes
snake_case and camelCase keys.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field

from app.api.schemas.base import APISchema
from app.domain.entities.tailored_cv import TailoredCV


class TailorRequest(BaseModel):
    """Request to tailor a base CV for a job.

    Identifiers are optional here so that a missing one is reported as a
    400 by the pipeline rather than a schema error.
    """

    cv_id: Optional[Any] = Field(None, description="Base CV identifier")
    job_id: Optional[Any] = Field(None, description="Job identifier")
    force: bool = Field(False, description="Regenerate even when a reusable outcome exists")


class TailoredCVResponse(APISchema):
    tailored_cv_id: str = Field(..., alias="tailoredCVId")
    file_url: Optional[str] = None
    cv_id: str
    job_id: str
    job_title: Optional[str] = Field(None, alias="jobTitle")
    ai_summary: Optional[str] = None
    ai_generated: bool
    created_at: datetime
    regenerated_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, tailored_cv: TailoredCV) -> "TailoredCVResponse":
        return cls(
            tailored_cv_id=str(tailored_cv.id),
            file_url=tailored_cv.file_url,
            cv_id=str(tailored_cv.cv_id),
            job_id=str(tailored_cv.job_id),
            job_title=tailored_cv.job_title,
            ai_summary=tailored_cv.ai_summary,
            ai_generated=tailored_cv.ai_generated,
            created_at=tailored_cv.created_at,
            regenerated_at=tailored_cv.regenerated_at,
        )


class TailorResponse(APISchema):
    message: str
    reused: bool
    tailored_cv: TailoredCVResponse = Field(..., alias="tailoredCv")


__all__ = ["TailorRequest", "TailorResponse", "TailoredCVResponse"]
