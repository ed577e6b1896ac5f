"""
Shared column helpers for SQLModel tables.

All tables use UUID primary keys and naive UTC timestamps written by the
application (see ``app.domain.utils.utc_now``).
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime, ForeignKey
from sqlalchemy.dialects.postgresql import UUID as PostgreSQLUUID
from sqlalchemy.sql import func
from sqlmodel import Field


def uuid_pk_column() -> Column:
    return Column(PostgreSQLUUID(as_uuid=True), primary_key=True, nullable=False)


def uuid_fk_column(target: str, *, nullable: bool = False, ondelete: str = "CASCADE") -> Column:
    return Column(
        PostgreSQLUUID(as_uuid=True),
        ForeignKey(target, ondelete=ondelete),
        nullable=nullable,
        index=True,
    )


def created_at_field(description: str = "Record creation timestamp") -> datetime:
    return Field(
        sa_column=Column(DateTime(timezone=False), nullable=False, server_default=func.now()),
        description=description,
    )


def optional_timestamp_field(description: str) -> Optional[datetime]:
    return Field(
        default=None,
        sa_column=Column(DateTime(timezone=False), nullable=True),
        description=description,
    )


__all__ = [
    "uuid_pk_column",
    "uuid_fk_column",
    "created_at_field",
    "optional_timestamp_field",
]
