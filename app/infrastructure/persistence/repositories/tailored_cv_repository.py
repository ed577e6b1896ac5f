"""PostgreSQL implementation of ITailoredCVRepository with upsert semantics."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import desc, func, select
from sqlalchemy.dialects.postgresql import insert

from app.database.sqlmodel_engine import SQLModelDatabaseManager
from app.domain.entities.tailored_cv import TailoredCV
from app.domain.repositories.tailored_cv_repository import ITailoredCVRepository
from app.domain.value_objects import CVId, JobId, TailoredCVId, UserId
from app.infrastructure.persistence.mappers.tailored_cv_mapper import TailoredCVMapper
from app.infrastructure.persistence.models.job_table import JobTable
from app.infrastructure.persistence.models.tailored_cv_table import (
    TAILORED_CV_TRIPLE_CONSTRAINT,
    TailoredCVTable,
)


class PostgresTailoredCVRepository(ITailoredCVRepository):
    """
    PostgreSQL adapter for tailoring outcomes.

    Writes go through INSERT ... ON CONFLICT on the (user, cv, job) unique
    constraint, so two first requests for the same triple collapse into one
    row and the last writer wins.
    """

    def __init__(self, db_manager: SQLModelDatabaseManager):
        self._db = db_manager

    async def get_for_triple(
        self,
        user_id: UserId,
        cv_id: CVId,
        job_id: JobId,
    ) -> Optional[TailoredCV]:
        async with self._db.get_session() as session:
            result = await session.execute(
                select(TailoredCVTable).where(
                    TailoredCVTable.user_id == user_id.value,
                    TailoredCVTable.cv_id == cv_id.value,
                    TailoredCVTable.job_id == job_id.value,
                )
            )
            row = result.scalars().first()
        return TailoredCVMapper.to_domain(row) if row else None

    async def upsert(self, tailored_cv: TailoredCV) -> TailoredCV:
        values = TailoredCVMapper.to_insert_values(tailored_cv)
        stmt = insert(TailoredCVTable).values(**values)
        stmt = stmt.on_conflict_do_update(
            constraint=TAILORED_CV_TRIPLE_CONSTRAINT,
            set_={
                "file_url": stmt.excluded.file_url,
                "ai_summary": stmt.excluded.ai_summary,
                "ai_generated": stmt.excluded.ai_generated,
                "regenerated_at": func.coalesce(
                    stmt.excluded.regenerated_at,
                    func.timezone("utc", func.now()),
                ),
            },
        ).returning(
            TailoredCVTable.id,
            TailoredCVTable.created_at,
            TailoredCVTable.regenerated_at,
        )

        async with self._db.get_session() as session:
            result = await session.execute(stmt)
            row = result.one()

        tailored_cv.id = TailoredCVId(row.id)
        tailored_cv.created_at = row.created_at
        tailored_cv.regenerated_at = row.regenerated_at
        return tailored_cv

    async def get_for_user(
        self,
        tailored_cv_id: TailoredCVId,
        user_id: UserId,
    ) -> Optional[TailoredCV]:
        async with self._db.get_session() as session:
            result = await session.execute(
                select(TailoredCVTable, JobTable.title)
                .outerjoin(JobTable, JobTable.id == TailoredCVTable.job_id)
                .where(
                    TailoredCVTable.id == tailored_cv_id.value,
                    TailoredCVTable.user_id == user_id.value,
                )
            )
            row = result.first()
        if row is None:
            return None
        table, job_title = row
        return TailoredCVMapper.to_domain(table, job_title=job_title)

    async def list_by_user(self, user_id: UserId) -> List[TailoredCV]:
        async with self._db.get_session() as session:
            result = await session.execute(
                select(TailoredCVTable, JobTable.title)
                .outerjoin(JobTable, JobTable.id == TailoredCVTable.job_id)
                .where(TailoredCVTable.user_id == user_id.value)
                .order_by(desc(TailoredCVTable.created_at))
            )
            rows = result.all()
        return [TailoredCVMapper.to_domain(table, job_title=title) for table, title in rows]


__all__ = ["PostgresTailoredCVRepository"]
