"""
Mock service implementations for testing.

Fakes for the document store and summary generator, plus spies that wrap
the real extractor and composer so tests can count invocations.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional
from uuid import uuid4

from app.domain.exceptions import (
    DocumentNotFoundError,
    StorageUnavailableError,
)
from app.domain.interfaces import (
    IDocumentComposer,
    IDocumentStore,
    ISummaryGenerator,
    ITextExtractor,
)
from app.domain.value_objects import ExtractedText, StoredDocument, Summary
from app.infrastructure.document.document_composer import PdfDocumentComposer
from app.infrastructure.document.text_extractor import DocumentTextExtractor


class MockDocumentStore(IDocumentStore):
    """Keeps documents in a dict keyed by ``mem://{folder}/{name}`` references."""

    def __init__(self):
        self.documents: Dict[str, bytes] = {}
        self.call_log: List[tuple] = []
        self.fail_fetch_with: Optional[Exception] = None
        self.fail_store = False

    def put(self, content: bytes, folder: str = "cvs", name: Optional[str] = None) -> str:
        reference = f"mem://{folder}/{name or uuid4().hex}"
        self.documents[reference] = content
        return reference

    @property
    def store_count(self) -> int:
        return sum(1 for call in self.call_log if call[0] == "store")

    async def fetch(self, reference: str) -> bytes:
        self.call_log.append(("fetch", reference))
        if self.fail_fetch_with is not None:
            raise self.fail_fetch_with
        if reference not in self.documents:
            raise DocumentNotFoundError(f"No document stored at {reference}")
        return self.documents[reference]

    async def store(
        self,
        content: bytes,
        folder: str,
        *,
        public_id: Optional[str] = None,
        extension: str = "",
    ) -> StoredDocument:
        self.call_log.append(("store", folder, public_id))
        if self.fail_store:
            raise StorageUnavailableError()
        name = f"{public_id or uuid4().hex}{extension}"
        reference = self.put(content, folder, name)
        return StoredDocument(url=reference, public_id=name, size=len(content))

    async def delete(self, reference: str) -> bool:
        self.call_log.append(("delete", reference))
        return self.documents.pop(reference, None) is not None

    async def check_health(self) -> Dict[str, Any]:
        return {"status": "healthy", "storage_type": "memory"}


class MockSummaryGenerator(ISummaryGenerator):
    """Returns a fixed summary, or the fallback when ``fail`` is set."""

    def __init__(self, text: str = "Seasoned engineer with a record of shipping.", fail: bool = False):
        self.text = text
        self.fail = fail
        self.calls: List[Dict[str, str]] = []

    async def generate(self, job_title: str, job_description: str, source_text: str) -> Summary:
        self.calls.append(
            {"job_title": job_title, "job_description": job_description, "source_text": source_text}
        )
        if self.fail:
            return Summary.fallback()
        return Summary(text=self.text, succeeded=True)

    async def check_health(self) -> Dict[str, Any]:
        return {"status": "healthy"}


class SpyTextExtractor(ITextExtractor):
    def __init__(self, delegate: Optional[ITextExtractor] = None, force_empty: bool = False):
        self.delegate = delegate or DocumentTextExtractor()
        self.force_empty = force_empty
        self.calls: List[Optional[int]] = []

    def extract(self, content: bytes, *, max_chars: Optional[int] = None) -> ExtractedText:
        self.calls.append(max_chars)
        if self.force_empty:
            return ExtractedText.empty()
        return self.delegate.extract(content, max_chars=max_chars)


class SpyDocumentComposer(IDocumentComposer):
    def __init__(self, delegate: Optional[IDocumentComposer] = None):
        self.delegate = delegate or PdfDocumentComposer()
        self.calls: List[Dict[str, str]] = []

    def compose(self, base_document: bytes, job_title: str, summary_text: str) -> bytes:
        self.calls.append({"job_title": job_title, "summary_text": summary_text})
        return self.delegate.compose(base_document, job_title, summary_text)


__all__ = [
    "MockDocumentStore",
    "MockSummaryGenerator",
    "SpyDocumentComposer",
    "SpyTextExtractor",
]
