"""
API Schemas - DTOs for REST API following hexagonal architecture.

Request/response models for the API layer, separated from domain entities
and persistence tables. Organized by feature area; import from the
submodules directly.
"""

from app.api.schemas.base import APISchema, MessageResponse

__all__ = ["APISchema", "MessageResponse"]
