"""
Stream-based reading of multipart uploads.

The size limit is enforced while reading, so an oversized upload is
rejected without holding more than ``max_size`` bytes in memory, even
when the client sent no usable ``size``.
"""

import asyncio
from typing import Optional

import structlog
from fastapi import UploadFile

from app.application.cv_service import UploadedFile
from app.domain.exceptions import FileTooLargeError, ValidationError

logger = structlog.get_logger(__name__)

# Default buffer size for streaming reads (64KB)
DEFAULT_BUFFER_SIZE = 64 * 1024


async def read_upload(
    file: Optional[UploadFile],
    max_size_bytes: int,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
) -> Optional[UploadedFile]:
    """
    Read an upload into memory, enforcing the size limit.

    Returns:
        UploadedFile, or None when no file part was sent

    Raises:
        FileTooLargeError: the upload exceeds ``max_size_bytes``
        ValidationError: the upload could not be read
    """
    if file is None:
        return None

    filename = file.filename or ""

    if file.size is not None and file.size > max_size_bytes:
        logger.warning(
            "Upload exceeds size limit (via size attribute)",
            filename=filename,
            file_size=file.size,
            max_size=max_size_bytes,
        )
        raise FileTooLargeError()

    chunks = []
    total_size = 0
    try:
        await file.seek(0)
        while True:
            chunk = await file.read(buffer_size)
            if not chunk:
                break

            total_size += len(chunk)
            if total_size > max_size_bytes:
                logger.warning(
                    "Upload exceeds size limit during streaming",
                    filename=filename,
                    bytes_read=total_size,
                    max_size=max_size_bytes,
                )
                raise FileTooLargeError()

            chunks.append(chunk)
            # Yield control every ~3MB at 64KB chunks
            if len(chunks) % 50 == 0:
                await asyncio.sleep(0)
    except OSError as e:
        logger.error("File I/O error while reading upload", filename=filename, error=str(e))
        raise ValidationError("Uploaded file could not be read") from e

    logger.debug("Upload read", filename=filename, file_size=total_size)
    return UploadedFile(
        filename=filename,
        content_type=file.content_type,
        content=b"".join(chunks),
    )


__all__ = ["read_upload", "DEFAULT_BUFFER_SIZE"]
