"""Dependency container for the tailored CV application service."""

from dataclasses import dataclass

from app.core.config import TailoringConfig
from app.domain.interfaces import (
    IDocumentComposer,
    IDocumentStore,
    ISummaryGenerator,
    ITextExtractor,
)
from app.domain.repositories import ICVRepository, IJobRepository, ITailoredCVRepository


@dataclass
class TailoringDependencies:
    """Container for tailoring pipeline collaborators."""

    job_repository: IJobRepository
    cv_repository: ICVRepository
    tailored_cv_repository: ITailoredCVRepository
    document_store: IDocumentStore
    text_extractor: ITextExtractor
    summary_generator: ISummaryGenerator
    document_composer: IDocumentComposer
    config: TailoringConfig


__all__ = ["TailoringDependencies"]
