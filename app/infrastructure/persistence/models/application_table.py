"""SQLModel table for job applications."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import Column, String, UniqueConstraint
from sqlmodel import Field, SQLModel

from app.infrastructure.persistence.models.base import (
    created_at_field,
    optional_timestamp_field,
    uuid_fk_column,
    uuid_pk_column,
)


APPLICATION_USER_JOB_CONSTRAINT = "uq_applications_user_job"


class ApplicationTable(SQLModel, table=True):
    """Job application table; one application per (user, job)."""

    __tablename__ = "applications"
    __table_args__ = (
        UniqueConstraint("user_id", "job_id", name=APPLICATION_USER_JOB_CONSTRAINT),
    )

    id: UUID = Field(sa_column=uuid_pk_column())
    user_id: UUID = Field(sa_column=uuid_fk_column("users.id"))
    job_id: UUID = Field(sa_column=uuid_fk_column("jobs.id"))
    cv_id: UUID = Field(sa_column=uuid_fk_column("cvs.id"))
    tailored_cv_id: Optional[UUID] = Field(
        default=None,
        sa_column=uuid_fk_column("tailored_cvs.id", nullable=True, ondelete="SET NULL"),
    )
    status: str = Field(
        default="pending",
        sa_column=Column(String(20), nullable=False, server_default="pending")
    )
    applied_at: datetime = created_at_field("Submission timestamp")
    updated_at: Optional[datetime] = optional_timestamp_field("Last status change")
