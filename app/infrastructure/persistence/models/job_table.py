"""SQLModel table for job postings."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import Column, Index, String, Text
from sqlmodel import Field, SQLModel

from app.infrastructure.persistence.models.base import (
    created_at_field,
    optional_timestamp_field,
    uuid_pk_column,
)


class JobTable(SQLModel, table=True):
    """Job posting table model."""

    __tablename__ = "jobs"
    __table_args__ = (
        Index("ix_jobs_created_at", "created_at"),
    )

    id: UUID = Field(sa_column=uuid_pk_column(), description="Job identifier")
    title: str = Field(sa_column=Column(String(255), nullable=False))
    company: Optional[str] = Field(default=None, sa_column=Column(String(255), nullable=True))
    description: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    location: Optional[str] = Field(default=None, sa_column=Column(String(255), nullable=True))
    type: Optional[str] = Field(default=None, sa_column=Column(String(50), nullable=True))
    requirements: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    status: str = Field(
        default="open",
        sa_column=Column(String(50), nullable=False, server_default="open")
    )
    created_at: datetime = created_at_field()
    updated_at: Optional[datetime] = optional_timestamp_field("Last status change")
