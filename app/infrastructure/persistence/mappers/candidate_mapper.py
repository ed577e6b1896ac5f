"""Mapper between Candidate domain entities and CandidateTable persistence models."""

from __future__ import annotations

from app.domain.entities.candidate import Candidate
from app.domain.value_objects import CandidateId, EmailAddress
from app.infrastructure.persistence.models.candidate_table import CandidateTable


class CandidateMapper:

    @staticmethod
    def to_domain(table: CandidateTable) -> Candidate:
        return Candidate(
            id=CandidateId(table.id),
            first_name=table.first_name,
            last_name=table.last_name,
            email=EmailAddress(table.email),
            created_at=table.created_at,
        )

    @staticmethod
    def to_table(entity: Candidate) -> CandidateTable:
        return CandidateTable(
            id=entity.id.value,
            first_name=entity.first_name,
            last_name=entity.last_name,
            email=str(entity.email),
            created_at=entity.created_at,
        )


__all__ = ["CandidateMapper"]
