"""Mapper between TailoredCV domain entities and TailoredCVTable persistence models."""

from __future__ import annotations

from typing import Any, Dict, Optional

from app.domain.entities.tailored_cv import TailoredCV
from app.domain.value_objects import CVId, JobId, TailoredCVId, UserId
from app.infrastructure.persistence.models.tailored_cv_table import TailoredCVTable


class TailoredCVMapper:
    """Maps between TailoredCV domain entities and TailoredCVTable persistence models."""

    @staticmethod
    def to_domain(table: TailoredCVTable, job_title: Optional[str] = None) -> TailoredCV:
        return TailoredCV(
            id=TailoredCVId(table.id),
            user_id=UserId(table.user_id),
            cv_id=CVId(table.cv_id),
            job_id=JobId(table.job_id),
            file_url=table.file_url,
            ai_summary=table.ai_summary,
            ai_generated=bool(table.ai_generated),
            created_at=table.created_at,
            regenerated_at=table.regenerated_at,
            job_title=job_title,
        )

    @staticmethod
    def to_insert_values(entity: TailoredCV) -> Dict[str, Any]:
        """Column values for an INSERT ... ON CONFLICT statement."""
        return {
            "id": entity.id.value,
            "user_id": entity.user_id.value,
            "cv_id": entity.cv_id.value,
            "job_id": entity.job_id.value,
            "file_url": entity.file_url,
            "ai_summary": entity.ai_summary,
            "ai_generated": entity.ai_generated,
            "created_at": entity.created_at,
            "regenerated_at": entity.regenerated_at,
        }


__all__ = ["TailoredCVMapper"]
