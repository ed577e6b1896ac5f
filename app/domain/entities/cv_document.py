"""Pure domain representation of uploaded base CVs."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import uuid4

from app.domain.utils import utc_now
from app.domain.value_objects import CVId, UserId


PDF_MIME_TYPE = "application/pdf"
DOC_MIME_TYPE = "application/msword"
DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

ALLOWED_CV_MIME_TYPES = frozenset({PDF_MIME_TYPE, DOC_MIME_TYPE, DOCX_MIME_TYPE})


@dataclass
class CVDocument:
    """Base CV uploaded by a user. Immutable once stored."""

    id: CVId
    user_id: UserId
    filename: str
    mimetype: str
    file_url: str
    size: Optional[int] = None
    uploaded_at: datetime = field(default_factory=utc_now)

    @classmethod
    def create(
        cls,
        user_id: UserId,
        filename: str,
        mimetype: str,
        file_url: str,
        size: Optional[int] = None,
    ) -> "CVDocument":
        return cls(
            id=CVId(uuid4()),
            user_id=user_id,
            filename=filename,
            mimetype=mimetype,
            file_url=file_url,
            size=size,
        )

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.user_id == user_id

    @property
    def is_pdf(self) -> bool:
        return self.mimetype == PDF_MIME_TYPE

    def download_filename(self) -> str:
        """Attachment name, forced to a .pdf suffix for PDF uploads."""
        if self.is_pdf and not self.filename.lower().endswith(".pdf"):
            return f"{self.filename}.pdf"
        return self.filename


__all__ = [
    "CVDocument",
    "ALLOWED_CV_MIME_TYPES",
    "PDF_MIME_TYPE",
    "DOC_MIME_TYPE",
    "DOCX_MIME_TYPE",
]
