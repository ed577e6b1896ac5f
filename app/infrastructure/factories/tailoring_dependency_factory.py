"""Concrete factory for creating TailoredCVApplicationService dependencies."""

from __future__ import annotations

from app.application.dependencies.tailoring_dependencies import TailoringDependencies
from app.core.config import get_settings
from app.infrastructure.providers.ai_provider import get_summary_generator
from app.infrastructure.providers.document_provider import (
    get_document_composer,
    get_text_extractor,
)
from app.infrastructure.providers.repository_provider import (
    get_cv_repository,
    get_job_repository,
    get_tailored_cv_repository,
)
from app.infrastructure.providers.storage_provider import get_document_store


async def get_tailoring_dependencies() -> TailoringDependencies:
    """
    Construct dependencies for the tailored CV pipeline.

    Every collaborator comes from its provider singleton; configuration is
    resolved once from settings.
    """
    return TailoringDependencies(
        job_repository=await get_job_repository(),
        cv_repository=await get_cv_repository(),
        tailored_cv_repository=await get_tailored_cv_repository(),
        document_store=await get_document_store(),
        text_extractor=await get_text_extractor(),
        summary_generator=await get_summary_generator(),
        document_composer=await get_document_composer(),
        config=get_settings().tailoring_config(),
    )


__all__ = ["get_tailoring_dependencies"]
