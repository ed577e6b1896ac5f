"""Provider utilities for the document store."""

from __future__ import annotations

import asyncio
from typing import Optional

import structlog

from app.core.config import get_settings
from app.domain.interfaces import IDocumentStore
from app.infrastructure.adapters.storage_adapter import LocalDocumentStore

logger = structlog.get_logger(__name__)

_document_store: Optional[IDocumentStore] = None
_lock = asyncio.Lock()


async def get_document_store() -> IDocumentStore:
    """
    Return singleton document store configured via settings.

    Example:
        ```python
        store = await get_document_store()
        stored = await store.store(content, settings.CV_FOLDER, extension=".pdf")
        ```
    """
    global _document_store

    if _document_store is not None:
        return _document_store

    async with _lock:
        if _document_store is not None:
            return _document_store

        settings = get_settings()
        _document_store = LocalDocumentStore(settings.document_store_config())
        logger.info("Document store initialized", base_path=settings.STORAGE_PATH)
        return _document_store


async def reset_document_store() -> None:
    global _document_store
    async with _lock:
        _document_store = None


__all__ = ["get_document_store", "reset_document_store"]
