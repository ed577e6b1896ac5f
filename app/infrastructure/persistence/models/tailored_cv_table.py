"""SQLModel table for tailoring outcomes."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import Boolean, Column, Text, UniqueConstraint
from sqlmodel import Field, SQLModel

from app.infrastructure.persistence.models.base import (
    created_at_field,
    optional_timestamp_field,
    uuid_fk_column,
    uuid_pk_column,
)


TAILORED_CV_TRIPLE_CONSTRAINT = "uq_tailored_cvs_user_cv_job"


class TailoredCVTable(SQLModel, table=True):
    """
    One row per (user, base CV, job) triple.

    Regeneration updates the row in place; ``regenerated_at`` records when.
    """

    __tablename__ = "tailored_cvs"
    __table_args__ = (
        UniqueConstraint("user_id", "cv_id", "job_id", name=TAILORED_CV_TRIPLE_CONSTRAINT),
    )

    id: UUID = Field(sa_column=uuid_pk_column(), description="Outcome identifier")
    user_id: UUID = Field(sa_column=uuid_fk_column("users.id"))
    cv_id: UUID = Field(sa_column=uuid_fk_column("cvs.id"))
    job_id: UUID = Field(sa_column=uuid_fk_column("jobs.id"))
    file_url: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
        description="Reference of the generated document"
    )
    ai_summary: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    ai_generated: bool = Field(
        default=False,
        sa_column=Column(Boolean, nullable=False, server_default="false"),
        description="Whether the summary came from the generative service"
    )
    created_at: datetime = created_at_field()
    regenerated_at: Optional[datetime] = optional_timestamp_field("Last in-place regeneration")
