"""Pure domain representation of recruiter-managed candidates."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4

from app.domain.exceptions import ValidationError
from app.domain.utils import utc_now
from app.domain.value_objects import CandidateId, EmailAddress


@dataclass
class Candidate:
    id: CandidateId
    first_name: str
    last_name: str
    email: EmailAddress
    created_at: datetime = field(default_factory=utc_now)

    @classmethod
    def create(cls, first_name: str, last_name: str, email: str) -> "Candidate":
        first = (first_name or "").strip()
        last = (last_name or "").strip()
        if not first or not last or not (email or "").strip():
            raise ValidationError("first_name, last_name and email are required")
        try:
            address = EmailAddress(email)
        except ValueError as exc:
            raise ValidationError(str(exc)) from exc
        return cls(
            id=CandidateId(uuid4()),
            first_name=first,
            last_name=last,
            email=address,
        )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


__all__ = ["Candidate"]
