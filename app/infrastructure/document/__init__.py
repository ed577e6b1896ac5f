"""Infrastructure layer document processing services."""

from app.infrastructure.document.document_composer import (
    LayoutStyle,
    PdfDocumentComposer,
)
from app.infrastructure.document.text_extractor import DocumentTextExtractor

__all__ = [
    "DocumentTextExtractor",
    "LayoutStyle",
    "PdfDocumentComposer",
]
