"""
Shared API response types and base schemas.

These are DTOs (Data Transfer Objects) in the API layer, separate from
domain entities and persistence tables.
"""

from pydantic import BaseModel, ConfigDict, Field


class APISchema(BaseModel):
    """Base for DTOs whose wire names differ from their attribute names."""

    model_config = ConfigDict(populate_by_name=True)


class MessageResponse(BaseModel):
    """Plain acknowledgement, also the shape of every error body."""

    message: str = Field(..., description="Human readable outcome")


__all__ = ["APISchema", "MessageResponse"]
