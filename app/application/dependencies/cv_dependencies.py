"""Dependency container for the CV upload application service."""

from dataclasses import dataclass

from app.domain.interfaces import IDocumentStore
from app.domain.repositories import ICVRepository


@dataclass
class CVDependencies:
    """Container for CV service dependencies."""

    cv_repository: ICVRepository
    document_store: IDocumentStore
    upload_folder: str
    max_file_size: int


__all__ = ["CVDependencies"]
