"""Application service for uploaded base CVs."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, List, Optional, Tuple

import structlog

from app.domain.entities.cv_document import (
    ALLOWED_CV_MIME_TYPES,
    DOC_MIME_TYPE,
    DOCX_MIME_TYPE,
    PDF_MIME_TYPE,
    CVDocument,
)
from app.domain.exceptions import (
    CVNotFoundError,
    DependencyUnavailableError,
    DocumentNotFoundError,
    DocumentUnreachableError,
    FileTooLargeError,
    UnsupportedMediaTypeError,
    ValidationError,
)
from app.domain.value_objects import CVId, UserId

if TYPE_CHECKING:
    from app.application.dependencies.cv_dependencies import CVDependencies


logger = structlog.get_logger(__name__)

_EXTENSIONS = {
    PDF_MIME_TYPE: ".pdf",
    DOC_MIME_TYPE: ".doc",
    DOCX_MIME_TYPE: ".docx",
}


@dataclass(frozen=True)
class UploadedFile:
    """An upload read into memory by the API layer."""

    filename: str
    content_type: Optional[str]
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)


class CVApplicationService:
    """Stores, lists, serves and deletes a user's base CVs."""

    def __init__(self, dependencies: CVDependencies) -> None:
        self._deps = dependencies

    def validate_upload(self, upload: Optional[UploadedFile]) -> None:
        """
        Raises:
            ValidationError: no file was sent
            UnsupportedMediaTypeError: not a PDF or Word document
            FileTooLargeError: larger than the configured limit
        """
        if upload is None or not upload.filename:
            raise ValidationError("No file uploaded")
        if upload.content_type not in ALLOWED_CV_MIME_TYPES:
            raise UnsupportedMediaTypeError()
        if upload.size > self._deps.max_file_size:
            raise FileTooLargeError()
        if upload.size == 0:
            raise ValidationError("Uploaded file is empty")

    async def upload(self, user_id: UserId, upload: Optional[UploadedFile]) -> CVDocument:
        """Store the file, then record it. Nothing is recorded when storage fails."""
        self.validate_upload(upload)

        stored = await self._deps.document_store.store(
            upload.content,
            self._deps.upload_folder,
            extension=_EXTENSIONS[upload.content_type],
        )

        cv = CVDocument.create(
            user_id=user_id,
            filename=os.path.basename(upload.filename),
            mimetype=upload.content_type,
            file_url=stored.url,
            size=upload.size,
        )
        cv = await self._deps.cv_repository.save(cv)

        logger.info(
            "CV uploaded",
            cv_id=str(cv.id),
            user_id=str(user_id),
            mimetype=cv.mimetype,
            file_size=cv.size,
        )
        return cv

    async def list_for_user(self, user_id: UserId) -> List[CVDocument]:
        return await self._deps.cv_repository.list_by_user(user_id)

    async def get_owned(self, cv_id: Any, user_id: UserId) -> CVDocument:
        cv = await self._deps.cv_repository.get_for_user(self._parse_id(cv_id), user_id)
        if cv is None:
            raise CVNotFoundError()
        return cv

    async def get_document(self, cv_id: Any, user_id: UserId) -> Tuple[CVDocument, bytes]:
        cv = await self.get_owned(cv_id, user_id)
        try:
            content = await self._deps.document_store.fetch(cv.file_url)
        except DocumentNotFoundError as exc:
            raise CVNotFoundError("CV file not found") from exc
        except DocumentUnreachableError as exc:
            raise DependencyUnavailableError("Document storage unavailable") from exc
        return cv, content

    async def delete(self, cv_id: Any, user_id: UserId) -> CVDocument:
        cv = await self._deps.cv_repository.delete_for_user(self._parse_id(cv_id), user_id)
        if cv is None:
            raise CVNotFoundError()

        try:
            await self._deps.document_store.delete(cv.file_url)
        except DependencyUnavailableError as exc:
            # The record is gone; an orphaned file is only wasted space
            logger.warning("Failed to delete CV file", cv_id=str(cv.id), error=exc.message)

        logger.info("CV deleted", cv_id=str(cv.id), user_id=str(user_id))
        return cv

    @staticmethod
    def _parse_id(cv_id: Any) -> CVId:
        try:
            return CVId(cv_id)
        except (TypeError, ValueError) as exc:
            raise CVNotFoundError() from exc


__all__ = ["CVApplicationService", "UploadedFile"]
