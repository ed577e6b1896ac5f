"""Uploaded CV DTOs."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from app.domain.entities.cv_document import CVDocument


class CVResponse(BaseModel):
    id: str
    filename: str
    mimetype: str
    file_url: str
    size: Optional[int] = None
    uploaded_at: datetime

    @classmethod
    def from_domain(cls, cv: CVDocument) -> "CVResponse":
        return cls(
            id=str(cv.id),
            filename=cv.filename,
            mimetype=cv.mimetype,
            file_url=cv.file_url,
            size=cv.size,
            uploaded_at=cv.uploaded_at,
        )


class CVUploadResponse(BaseModel):
    message: str
    cv: CVResponse


__all__ = ["CVResponse", "CVUploadResponse"]
