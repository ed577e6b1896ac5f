"""Pure domain representation of job postings."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import uuid4

from app.domain.exceptions import ValidationError
from app.domain.utils import utc_now
from app.domain.value_objects import JobId


DEFAULT_JOB_STATUS = "open"


@dataclass
class Job:
    """Job posting that CVs are tailored for and applications target."""

    id: JobId
    title: str
    company: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    type: Optional[str] = None
    requirements: Optional[str] = None
    status: str = DEFAULT_JOB_STATUS
    created_at: datetime = field(default_factory=utc_now)
    updated_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        title: Optional[str],
        *,
        company: Optional[str] = None,
        description: Optional[str] = None,
        location: Optional[str] = None,
        type: Optional[str] = None,
        requirements: Optional[str] = None,
    ) -> "Job":
        if not title or not title.strip():
            raise ValidationError("Job title is required")
        return cls(
            id=JobId(uuid4()),
            title=title.strip(),
            company=company or None,
            description=description or None,
            location=location or None,
            type=type or None,
            requirements=requirements or None,
        )

    def change_status(self, status: Optional[str]) -> None:
        if not status or not status.strip():
            raise ValidationError("Status is required")
        self.status = status.strip()
        self.updated_at = utc_now()

    @property
    def description_text(self) -> str:
        """Description for prompting; empty when the posting has none."""
        return self.description or ""


__all__ = ["Job", "DEFAULT_JOB_STATUS"]
