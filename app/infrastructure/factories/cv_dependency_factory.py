"""Concrete factory for creating CVApplicationService dependencies."""

from __future__ import annotations

from app.application.dependencies.cv_dependencies import CVDependencies
from app.core.config import get_settings
from app.infrastructure.providers.repository_provider import get_cv_repository
from app.infrastructure.providers.storage_provider import get_document_store


async def get_cv_dependencies() -> CVDependencies:
    settings = get_settings()
    return CVDependencies(
        cv_repository=await get_cv_repository(),
        document_store=await get_document_store(),
        upload_folder=settings.CV_FOLDER,
        max_file_size=settings.MAX_CV_SIZE,
    )


__all__ = ["get_cv_dependencies"]
