"""Pure domain representation of tailoring outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import uuid4

from app.domain.utils import utc_now
from app.domain.value_objects import CVId, JobId, Summary, TailoredCVId, UserId


@dataclass
class TailoredCV:
    """Persisted record of one tailoring attempt for an (owner, base CV, job) triple.

    At most one row exists per triple. A row whose summary failed is never
    reused; the next request regenerates it in place.
    """

    id: TailoredCVId
    user_id: UserId
    cv_id: CVId
    job_id: JobId
    file_url: Optional[str] = None
    ai_summary: Optional[str] = None
    ai_generated: bool = False
    created_at: datetime = field(default_factory=utc_now)
    regenerated_at: Optional[datetime] = None
    job_title: Optional[str] = None

    @classmethod
    def create(
        cls,
        user_id: UserId,
        cv_id: CVId,
        job_id: JobId,
        *,
        file_url: str,
        summary: Summary,
    ) -> "TailoredCV":
        return cls(
            id=TailoredCVId(uuid4()),
            user_id=user_id,
            cv_id=cv_id,
            job_id=job_id,
            file_url=file_url,
            ai_summary=summary.text,
            ai_generated=summary.succeeded,
        )

    def is_reusable(self) -> bool:
        return self.ai_generated

    def should_reuse(self, force: bool) -> bool:
        return self.is_reusable() and not force

    def regenerate(self, *, file_url: str, summary: Summary) -> None:
        """Overwrite the outcome in place, keeping its identity."""
        self.file_url = file_url
        self.ai_summary = summary.text
        self.ai_generated = summary.succeeded
        self.regenerated_at = utc_now()

    @property
    def has_document(self) -> bool:
        return bool(self.file_url)

    def download_filename(self) -> str:
        return f"tailored_cv_{self.id}.pdf"


__all__ = ["TailoredCV"]
