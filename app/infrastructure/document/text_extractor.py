"""
Best-effort text extraction for uploaded CVs.

- PDF documents via PyPDF2
- DOCX documents via python-docx
- Anything else (legacy .doc, images, garbage) yields empty text

Extraction never raises: parse failures are logged and reported through
``ExtractedText.succeeded``.
"""

import io
import re
from typing import Optional

import docx
import structlog
from PyPDF2 import PdfReader
from PyPDF2.errors import PdfReadError

from app.domain.interfaces import ITextExtractor
from app.domain.value_objects import ExtractedText

logger = structlog.get_logger(__name__)

PDF_MAGIC = b"%PDF"
ZIP_MAGIC = b"PK\x03\x04"


class DocumentTextExtractor(ITextExtractor):
    """Turns PDF or DOCX bytes into normalized plain text."""

    def __init__(self, default_max_chars: Optional[int] = None):
        self.default_max_chars = default_max_chars

    def extract(self, content: bytes, *, max_chars: Optional[int] = None) -> ExtractedText:
        """
        Extract text from document bytes.

        Args:
            content: Raw document bytes
            max_chars: Character budget; the text is cut to this prefix

        Returns:
            ExtractedText with ``succeeded=False`` when nothing usable was found
        """
        limit = max_chars if max_chars is not None else self.default_max_chars

        if not content:
            logger.warning("Text extraction skipped: empty document")
            return ExtractedText.empty()

        try:
            if content.lstrip()[:4] == PDF_MAGIC:
                text = self._extract_pdf(content)
                document_type = "pdf"
            elif content[:4] == ZIP_MAGIC:
                text = self._extract_docx(content)
                document_type = "docx"
            else:
                logger.warning("Text extraction skipped: unsupported document format")
                return ExtractedText.empty()
        except Exception as e:
            logger.warning(
                "Text extraction failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            return ExtractedText.empty()

        text = self._clean_text(text)
        if limit is not None and limit >= 0:
            text = text[:limit]

        if not text:
            logger.warning("Text extraction produced no text", document_type=document_type)
            return ExtractedText.empty()

        logger.debug("Text extracted", document_type=document_type, characters=len(text))
        return ExtractedText(text=text, succeeded=True)

    def _extract_pdf(self, content: bytes) -> str:
        reader = PdfReader(io.BytesIO(content))
        if reader.is_encrypted:
            # Many CVs are "encrypted" with an empty user password
            try:
                reader.decrypt("")
            except Exception as e:
                raise PdfReadError("PDF is password protected") from e

        parts = []
        for page_num, page in enumerate(reader.pages, 1):
            try:
                parts.append(page.extract_text() or "")
            except Exception as e:
                logger.warning("Failed to extract page", page_number=page_num, error=str(e))
        return "\n".join(parts)

    def _extract_docx(self, content: bytes) -> str:
        document = docx.Document(io.BytesIO(content))
        return "\n".join(paragraph.text for paragraph in document.paragraphs)

    def _clean_text(self, text: str) -> str:
        """Clean and normalize extracted text"""
        if not text:
            return ""

        text = text.replace("\x00", "")
        # Remove control characters except whitespace
        text = re.sub(r"[\x01-\x08\x0b\x0c\x0e-\x1f\x7f]", "", text)
        text = re.sub(r"\s+", " ", text)

        return text.strip()


__all__ = ["DocumentTextExtractor"]
