"""Local filesystem document store implementing IDocumentStore.

Documents are written below a base directory as ``{folder}/{public_id}{ext}``
and addressed by opaque references:

- ``local://{folder}/{file}`` when no public base URL is configured
- ``{public_base_url}/{folder}/{file}`` otherwise

Any other ``http(s)`` reference (for example a CV uploaded to an external
object store before migration) is fetched with a plain HTTP GET.
"""

from __future__ import annotations

import asyncio
import os
import re
from pathlib import Path
from typing import Any, Optional
from uuid import uuid4

import aiofiles
import httpx
import structlog

from app.core.config import DocumentStoreConfig
from app.domain.exceptions import (
    DocumentNotFoundError,
    DocumentUnreachableError,
    StorageUnavailableError,
)
from app.domain.interfaces import IDocumentStore
from app.domain.value_objects import StoredDocument

logger = structlog.get_logger(__name__)

LOCAL_SCHEME = "local://"

_SEGMENT_PATTERN = re.compile(r"[^a-zA-Z0-9._-]")


class LocalDocumentStore(IDocumentStore):
    """
    Document store gateway backed by the local filesystem.

    Reads and writes carry the configured timeout. Nothing is retried;
    the caller decides what a failure means.

    Example:
        >>> store = LocalDocumentStore(DocumentStoreConfig(base_path="/var/cvs"))
        >>> stored = await store.store(pdf_bytes, "remote-job-manager/cvs", extension=".pdf")
        >>> content = await store.fetch(stored.url)
    """

    def __init__(
        self,
        config: DocumentStoreConfig,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config
        self.base_path = Path(config.base_path).resolve()
        self.base_path.mkdir(parents=True, exist_ok=True)
        self._public_prefix = (
            config.public_base_url.rstrip("/") + "/" if config.public_base_url else None
        )
        self._http_client = http_client

        logger.info(
            "LocalDocumentStore initialized",
            base_path=str(self.base_path),
            public_base_url=config.public_base_url,
        )

    def _sanitize_segment(self, segment: str) -> str:
        """
        Sanitize one path segment.

        Removes directory components and dangerous characters and refuses
        hidden or empty names.
        """
        segment = os.path.basename(segment.strip())
        sanitized = _SEGMENT_PATTERN.sub("_", segment)
        if sanitized.startswith("."):
            sanitized = "file_" + sanitized
        if not sanitized or sanitized in (".", ".."):
            raise ValueError(f"Invalid path segment: {segment!r}")
        return sanitized

    def _folder_path(self, folder: str) -> str:
        parts = [p for p in folder.replace("\\", "/").split("/") if p.strip()]
        if not parts:
            raise ValueError("Folder cannot be empty")
        return "/".join(self._sanitize_segment(p) for p in parts)

    def _reference_for(self, relative_path: str) -> str:
        if self._public_prefix:
            return f"{self._public_prefix}{relative_path}"
        return f"{LOCAL_SCHEME}{relative_path}"

    def _local_relative_path(self, reference: str) -> Optional[str]:
        """Return the path below ``base_path`` for references this store owns."""
        if reference.startswith(LOCAL_SCHEME):
            return reference[len(LOCAL_SCHEME):]
        if self._public_prefix and reference.startswith(self._public_prefix):
            return reference[len(self._public_prefix):]
        return None

    def _resolve(self, relative_path: str) -> Path:
        # Path traversal protection: the resolved file must stay below base_path
        path = (self.base_path / relative_path).resolve()
        if self.base_path not in path.parents:
            raise DocumentNotFoundError(f"Invalid document reference: {relative_path}")
        return path

    async def fetch(self, reference: str) -> bytes:
        """
        Resolve a reference to bytes.

        Raises:
            DocumentNotFoundError: nothing is stored under the reference
            DocumentUnreachableError: the store could not be read in time
        """
        if not reference:
            raise DocumentNotFoundError("Empty document reference")

        relative_path = self._local_relative_path(reference)
        if relative_path is not None:
            return await self._read_local(relative_path)

        if reference.startswith(("http://", "https://")):
            return await self._fetch_remote(reference)

        raise DocumentNotFoundError(f"Unsupported document reference: {reference}")

    async def _read_local(self, relative_path: str) -> bytes:
        path = self._resolve(relative_path)
        if not path.is_file():
            logger.warning("Stored document not found", path=relative_path)
            raise DocumentNotFoundError(f"No document stored at {relative_path}")

        async def _read() -> bytes:
            async with aiofiles.open(path, "rb") as f:
                return await f.read()

        try:
            content = await asyncio.wait_for(_read(), timeout=self.config.timeout_seconds)
        except (OSError, asyncio.TimeoutError) as e:
            logger.error(
                "Failed to read stored document",
                path=relative_path,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise DocumentUnreachableError(f"Failed to read {relative_path}") from e

        logger.debug("Document fetched", path=relative_path, file_size=len(content))
        return content

    async def _fetch_remote(self, url: str) -> bytes:
        try:
            if self._http_client is not None:
                response = await self._http_client.get(url, timeout=self.config.timeout_seconds)
            else:
                async with httpx.AsyncClient(
                    timeout=self.config.timeout_seconds,
                    follow_redirects=True,
                ) as client:
                    response = await client.get(url)
        except httpx.HTTPError as e:
            logger.error("Remote document unreachable", url=url, error=str(e))
            raise DocumentUnreachableError(f"Failed to fetch {url}") from e

        if response.status_code == 404:
            raise DocumentNotFoundError(f"No document at {url}")
        if response.status_code >= 400:
            logger.error("Remote document fetch failed", url=url, status_code=response.status_code)
            raise DocumentUnreachableError(
                f"Fetching {url} returned HTTP {response.status_code}"
            )
        return response.content

    async def store(
        self,
        content: bytes,
        folder: str,
        *,
        public_id: Optional[str] = None,
        extension: str = "",
    ) -> StoredDocument:
        """
        Write bytes under ``folder`` and return their reference.

        An existing document with the same ``public_id`` is overwritten.

        Raises:
            StorageUnavailableError: the write failed or timed out
        """
        folder_path = self._folder_path(folder)
        name = self._sanitize_segment(public_id or uuid4().hex)
        if extension and not extension.startswith("."):
            extension = f".{extension}"
        relative_path = f"{folder_path}/{name}{extension.lower()}"
        path = self._resolve(relative_path)

        async def _write() -> None:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = path.with_name(f".{path.name}.{uuid4().hex}.tmp")
            async with aiofiles.open(tmp_path, "wb") as f:
                await f.write(content)
            os.replace(tmp_path, path)

        try:
            await asyncio.wait_for(_write(), timeout=self.config.timeout_seconds)
        except (OSError, asyncio.TimeoutError) as e:
            logger.error(
                "Failed to store document",
                path=relative_path,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise StorageUnavailableError() from e

        reference = self._reference_for(relative_path)
        logger.info(
            "Document stored",
            path=relative_path,
            file_size=len(content),
        )
        return StoredDocument(url=reference, public_id=name, size=len(content))

    async def delete(self, reference: str) -> bool:
        relative_path = self._local_relative_path(reference or "")
        if relative_path is None:
            logger.debug("Skipping delete of foreign reference", reference=reference)
            return False
        try:
            path = self._resolve(relative_path)
        except DocumentNotFoundError:
            return False
        if not path.is_file():
            return False
        try:
            path.unlink()
        except OSError as e:
            logger.error("Failed to delete stored document", path=relative_path, error=str(e))
            raise StorageUnavailableError("Failed to delete document") from e
        logger.info("Document deleted", path=relative_path)
        return True

    async def check_health(self) -> dict[str, Any]:
        path_exists = self.base_path.exists()
        is_writable = os.access(self.base_path, os.W_OK) if path_exists else False
        return {
            "status": "healthy" if path_exists and is_writable else "unhealthy",
            "storage_type": "local_filesystem",
            "base_path": str(self.base_path),
            "is_writable": is_writable,
        }


__all__ = ["LocalDocumentStore", "LOCAL_SCHEME"]
