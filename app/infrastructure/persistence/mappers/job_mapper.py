"""Mapper between Job domain entities and JobTable persistence models."""

from __future__ import annotations

from app.domain.entities.job import Job
from app.domain.value_objects import JobId
from app.infrastructure.persistence.models.job_table import JobTable


class JobMapper:
    """Maps between Job domain entities and JobTable persistence models."""

    @staticmethod
    def to_domain(table: JobTable) -> Job:
        return Job(
            id=JobId(table.id),
            title=table.title,
            company=table.company,
            description=table.description,
            location=table.location,
            type=table.type,
            requirements=table.requirements,
            status=table.status,
            created_at=table.created_at,
            updated_at=table.updated_at,
        )

    @staticmethod
    def to_table(entity: Job) -> JobTable:
        return JobTable(
            id=entity.id.value,
            title=entity.title,
            company=entity.company,
            description=entity.description,
            location=entity.location,
            type=entity.type,
            requirements=entity.requirements,
            status=entity.status,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    @staticmethod
    def update_table(table: JobTable, entity: Job) -> None:
        table.title = entity.title
        table.company = entity.company
        table.description = entity.description
        table.location = entity.location
        table.type = entity.type
        table.requirements = entity.requirements
        table.status = entity.status
        table.updated_at = entity.updated_at


__all__ = ["JobMapper"]
