"""Provider utilities for document processing services."""

from __future__ import annotations

import asyncio
from typing import Optional

from app.core.config import get_settings
from app.domain.interfaces import IDocumentComposer, ITextExtractor
from app.infrastructure.document.document_composer import LayoutStyle, PdfDocumentComposer
from app.infrastructure.document.text_extractor import DocumentTextExtractor

_text_extractor: Optional[ITextExtractor] = None
_document_composer: Optional[IDocumentComposer] = None

_extractor_lock = asyncio.Lock()
_composer_lock = asyncio.Lock()


async def get_text_extractor() -> ITextExtractor:
    global _text_extractor

    if _text_extractor is not None:
        return _text_extractor

    async with _extractor_lock:
        if _text_extractor is None:
            _text_extractor = DocumentTextExtractor(
                default_max_chars=get_settings().SOURCE_TEXT_BUDGET
            )
        return _text_extractor


async def get_document_composer() -> IDocumentComposer:
    global _document_composer

    if _document_composer is not None:
        return _document_composer

    async with _composer_lock:
        if _document_composer is None:
            _document_composer = PdfDocumentComposer(
                LayoutStyle(line_width=get_settings().SUMMARY_LINE_WIDTH)
            )
        return _document_composer


async def reset_document_services() -> None:
    global _text_extractor, _document_composer
    async with _extractor_lock:
        _text_extractor = None
    async with _composer_lock:
        _document_composer = None


__all__ = ["get_text_extractor", "get_document_composer", "reset_document_services"]
