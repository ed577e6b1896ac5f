"""SQLModel table for uploaded base CVs."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import Column, Integer, String, Text
from sqlmodel import Field, SQLModel

from app.infrastructure.persistence.models.base import (
    created_at_field,
    uuid_fk_column,
    uuid_pk_column,
)


class CVTable(SQLModel, table=True):
    """Base CV metadata; the bytes live in the document store."""

    __tablename__ = "cvs"

    id: UUID = Field(sa_column=uuid_pk_column(), description="CV identifier")
    user_id: UUID = Field(sa_column=uuid_fk_column("users.id"), description="Owner")
    filename: str = Field(sa_column=Column(String(255), nullable=False), description="Original filename")
    mimetype: str = Field(sa_column=Column(String(100), nullable=False))
    file_url: str = Field(sa_column=Column(Text, nullable=False), description="Document store reference")
    size: Optional[int] = Field(default=None, sa_column=Column(Integer, nullable=True))
    uploaded_at: datetime = created_at_field("Upload timestamp")
