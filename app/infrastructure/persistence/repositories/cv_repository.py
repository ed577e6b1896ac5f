"""PostgreSQL implementation of ICVRepository."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import desc, select

from app.database.sqlmodel_engine import SQLModelDatabaseManager
from app.domain.entities.cv_document import CVDocument
from app.domain.repositories.cv_repository import ICVRepository
from app.domain.value_objects import CVId, UserId
from app.infrastructure.persistence.mappers.cv_mapper import CVMapper
from app.infrastructure.persistence.models.cv_table import CVTable


class PostgresCVRepository(ICVRepository):
    """PostgreSQL adapter implementation of ICVRepository."""

    def __init__(self, db_manager: SQLModelDatabaseManager):
        self._db = db_manager

    async def save(self, cv: CVDocument) -> CVDocument:
        async with self._db.get_session() as session:
            session.add(CVMapper.to_table(cv))
        return cv

    async def get_for_user(self, cv_id: CVId, user_id: UserId) -> Optional[CVDocument]:
        async with self._db.get_session() as session:
            result = await session.execute(
                select(CVTable).where(
                    CVTable.id == cv_id.value,
                    CVTable.user_id == user_id.value,
                )
            )
            row = result.scalars().first()
        return CVMapper.to_domain(row) if row else None

    async def list_by_user(self, user_id: UserId) -> List[CVDocument]:
        async with self._db.get_session() as session:
            result = await session.execute(
                select(CVTable)
                .where(CVTable.user_id == user_id.value)
                .order_by(desc(CVTable.uploaded_at))
            )
            rows = result.scalars().all()
        return [CVMapper.to_domain(row) for row in rows]

    async def delete_for_user(self, cv_id: CVId, user_id: UserId) -> Optional[CVDocument]:
        async with self._db.get_session() as session:
            result = await session.execute(
                select(CVTable).where(
                    CVTable.id == cv_id.value,
                    CVTable.user_id == user_id.value,
                )
            )
            row = result.scalars().first()
            if row is None:
                return None
            cv = CVMapper.to_domain(row)
            await session.delete(row)
        return cv


__all__ = ["PostgresCVRepository"]
