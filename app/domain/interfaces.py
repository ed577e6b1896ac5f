"""Domain-layer service interfaces.

These abstractions define the stable contracts that the application layer relies on,
while infrastructure adapters provide concrete implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from app.domain.value_objects import ExtractedText, StoredDocument, Summary


class IHealthCheck:
    """Health check interface mixin."""

    @abstractmethod
    async def check_health(self) -> Dict[str, Any]:
        """Return health check details."""
        pass


class IDocumentStore(IHealthCheck, ABC):
    """Document storage gateway.

    ``fetch`` raises ``DocumentNotFoundError`` or ``DocumentUnreachableError``;
    ``store`` raises ``StorageUnavailableError``. Neither retries.
    """

    @abstractmethod
    async def fetch(self, reference: str) -> bytes:
        """Resolve a stored reference to its bytes."""
        pass

    @abstractmethod
    async def store(
        self,
        content: bytes,
        folder: str,
        *,
        public_id: Optional[str] = None,
        extension: str = "",
    ) -> StoredDocument:
        """Persist bytes under ``folder`` and return a reference to them."""
        pass

    @abstractmethod
    async def delete(self, reference: str) -> bool:
        """Remove a stored document. Returns False when nothing was removed."""
        pass


class ITextExtractor(ABC):
    """Best-effort conversion of a binary document into plain text."""

    @abstractmethod
    def extract(self, content: bytes, *, max_chars: Optional[int] = None) -> ExtractedText:
        """Extract text, truncated to ``max_chars``. Never raises."""
        pass


class ISummaryGenerator(IHealthCheck, ABC):
    """Produces a tailored professional summary, degrading to a fallback."""

    @abstractmethod
    async def generate(self, job_title: str, job_description: str, source_text: str) -> Summary:
        """Generate a summary. Never raises."""
        pass


class IDocumentComposer(ABC):
    """Overlays a generated summary onto a copy of a base document."""

    @abstractmethod
    def compose(self, base_document: bytes, job_title: str, summary_text: str) -> bytes:
        """Return new document bytes. Raises ``DocumentCompositionError`` on unparsable input."""
        pass


__all__ = [
    "IHealthCheck",
    "IDocumentStore",
    "ITextExtractor",
    "ISummaryGenerator",
    "IDocumentComposer",
]
