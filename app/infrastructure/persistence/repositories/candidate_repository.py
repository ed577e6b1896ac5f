"""PostgreSQL implementation of ICandidateRepository."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import desc, select
from sqlalchemy.exc import IntegrityError

from app.database.sqlmodel_engine import SQLModelDatabaseManager
from app.domain.entities.candidate import Candidate
from app.domain.exceptions import ConflictError
from app.domain.repositories.candidate_repository import ICandidateRepository
from app.domain.value_objects import CandidateId, EmailAddress
from app.infrastructure.persistence.mappers.candidate_mapper import CandidateMapper
from app.infrastructure.persistence.models.candidate_table import CandidateTable


class PostgresCandidateRepository(ICandidateRepository):

    def __init__(self, db_manager: SQLModelDatabaseManager):
        self._db = db_manager

    async def save(self, candidate: Candidate) -> Candidate:
        try:
            async with self._db.get_session() as session:
                session.add(CandidateMapper.to_table(candidate))
        except IntegrityError as exc:
            raise ConflictError("Candidate with this email already exists") from exc
        return candidate

    async def get_by_id(self, candidate_id: CandidateId) -> Optional[Candidate]:
        async with self._db.get_session() as session:
            row = await session.get(CandidateTable, candidate_id.value)
        return CandidateMapper.to_domain(row) if row else None

    async def get_by_email(self, email: EmailAddress) -> Optional[Candidate]:
        async with self._db.get_session() as session:
            result = await session.execute(
                select(CandidateTable).where(CandidateTable.email == str(email))
            )
            row = result.scalars().first()
        return CandidateMapper.to_domain(row) if row else None

    async def list(self) -> List[Candidate]:
        async with self._db.get_session() as session:
            result = await session.execute(
                select(CandidateTable).order_by(desc(CandidateTable.created_at))
            )
            rows = result.scalars().all()
        return [CandidateMapper.to_domain(row) for row in rows]

    async def delete(self, candidate_id: CandidateId) -> bool:
        async with self._db.get_session() as session:
            row = await session.get(CandidateTable, candidate_id.value)
            if row is None:
                return False
            await session.delete(row)
        return True


__all__ = ["PostgresCandidateRepository"]
