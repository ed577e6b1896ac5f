"""Candidate DTOs."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from app.domain.entities.candidate import Candidate


class CandidateCreateRequest(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None


class CandidateResponse(BaseModel):
    id: str
    first_name: str
    last_name: str
    email: str
    created_at: datetime

    @classmethod
    def from_domain(cls, candidate: Candidate) -> "CandidateResponse":
        return cls(
            id=str(candidate.id),
            first_name=candidate.first_name,
            last_name=candidate.last_name,
            email=str(candidate.email),
            created_at=candidate.created_at,
        )


__all__ = ["CandidateCreateRequest", "CandidateResponse"]
