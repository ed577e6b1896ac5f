"""Mapper between CVDocument domain entities and CVTable persistence models."""

from __future__ import annotations

from app.domain.entities.cv_document import CVDocument
from app.domain.value_objects import CVId, UserId
from app.infrastructure.persistence.models.cv_table import CVTable


class CVMapper:

    @staticmethod
    def to_domain(table: CVTable) -> CVDocument:
        return CVDocument(
            id=CVId(table.id),
            user_id=UserId(table.user_id),
            filename=table.filename,
            mimetype=table.mimetype,
            file_url=table.file_url,
            size=table.size,
            uploaded_at=table.uploaded_at,
        )

    @staticmethod
    def to_table(entity: CVDocument) -> CVTable:
        return CVTable(
            id=entity.id.value,
            user_id=entity.user_id.value,
            filename=entity.filename,
            mimetype=entity.mimetype,
            file_url=entity.file_url,
            size=entity.size,
            uploaded_at=entity.uploaded_at,
        )


__all__ = ["CVMapper"]
