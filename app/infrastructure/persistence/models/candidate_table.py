"""SQLModel table for candidates."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Column, String
from sqlmodel import Field, SQLModel

from app.infrastructure.persistence.models.base import created_at_field, uuid_pk_column


class CandidateTable(SQLModel, table=True):
    __tablename__ = "candidates"

    id: UUID = Field(sa_column=uuid_pk_column())
    first_name: str = Field(sa_column=Column(String(100), nullable=False))
    last_name: str = Field(sa_column=Column(String(100), nullable=False))
    email: str = Field(sa_column=Column(String(255), nullable=False, unique=True, index=True))
    created_at: datetime = created_at_field()
