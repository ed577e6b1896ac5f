"""SQLModel table for user accounts."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import Column, String
from sqlmodel import Field, SQLModel

from app.infrastructure.persistence.models.base import (
    created_at_field,
    optional_timestamp_field,
    uuid_pk_column,
)


class UserTable(SQLModel, table=True):
    """User account table model."""

    __tablename__ = "users"

    id: UUID = Field(sa_column=uuid_pk_column(), description="User identifier")
    email: str = Field(
        sa_column=Column(String(255), nullable=False, unique=True, index=True),
        description="Lower-cased email address"
    )
    hashed_password: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="bcrypt password hash"
    )
    name: Optional[str] = Field(
        default=None,
        sa_column=Column(String(100), nullable=True),
        description="Display name"
    )
    role: str = Field(
        default="user",
        sa_column=Column(String(20), nullable=False, server_default="user"),
        description="user or admin"
    )
    created_at: datetime = created_at_field()
    last_login_at: Optional[datetime] = optional_timestamp_field("Last successful login")
