"""Tests for the filesystem document store gateway."""

import httpx
import pytest

from app.core.config import DocumentStoreConfig
from app.domain.exceptions import DocumentNotFoundError, DocumentUnreachableError
from app.infrastructure.adapters.storage_adapter import LocalDocumentStore


@pytest.fixture
def store(tmp_path):
    return LocalDocumentStore(DocumentStoreConfig(base_path=str(tmp_path)))


def remote_store(tmp_path, handler):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return LocalDocumentStore(DocumentStoreConfig(base_path=str(tmp_path)), http_client=client)


class TestStoreAndFetch:
    @pytest.mark.asyncio
    async def test_round_trip(self, store, tmp_path):
        stored = await store.store(b"%PDF-bytes", "remote-job-manager/cvs", public_id="abc", extension=".pdf")

        assert stored.url == "local://remote-job-manager/cvs/abc.pdf"
        assert stored.size == len(b"%PDF-bytes")
        assert (tmp_path / "remote-job-manager" / "cvs" / "abc.pdf").read_bytes() == b"%PDF-bytes"
        assert await store.fetch(stored.url) == b"%PDF-bytes"

    @pytest.mark.asyncio
    async def test_same_public_id_overwrites(self, store):
        first = await store.store(b"one", "tailored", public_id="same", extension="pdf")
        second = await store.store(b"two", "tailored", public_id="same", extension="pdf")

        assert first.url == second.url
        assert await store.fetch(first.url) == b"two"

    @pytest.mark.asyncio
    async def test_generated_names_are_unique(self, store):
        first = await store.store(b"a", "cvs")
        second = await store.store(b"b", "cvs")

        assert first.url != second.url

    @pytest.mark.asyncio
    async def test_public_base_url_references(self, tmp_path):
        store = LocalDocumentStore(
            DocumentStoreConfig(base_path=str(tmp_path), public_base_url="https://files.example.com/")
        )

        stored = await store.store(b"data", "cvs", public_id="x", extension=".pdf")

        assert stored.url == "https://files.example.com/cvs/x.pdf"
        assert await store.fetch(stored.url) == b"data"

    @pytest.mark.asyncio
    async def test_unsafe_names_are_sanitized(self, store, tmp_path):
        stored = await store.store(b"data", "../../outside", public_id="../evil name", extension=".pdf")

        assert stored.url.startswith("local://")
        assert not (tmp_path.parent / "outside").exists()


class TestFetchFailures:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "reference",
        ["", "local://cvs/missing.pdf", "local://../../etc/passwd", "ftp://elsewhere/file.pdf"],
    )
    async def test_not_found(self, store, reference):
        with pytest.raises(DocumentNotFoundError):
            await store.fetch(reference)

    @pytest.mark.asyncio
    async def test_remote_document(self, tmp_path):
        store = remote_store(tmp_path, lambda request: httpx.Response(200, content=b"remote"))

        assert await store.fetch("https://cdn.example.com/cv.pdf") == b"remote"

    @pytest.mark.asyncio
    async def test_remote_404_is_not_found(self, tmp_path):
        store = remote_store(tmp_path, lambda request: httpx.Response(404))

        with pytest.raises(DocumentNotFoundError):
            await store.fetch("https://cdn.example.com/cv.pdf")

    @pytest.mark.asyncio
    async def test_remote_server_error_is_unreachable(self, tmp_path):
        store = remote_store(tmp_path, lambda request: httpx.Response(502))

        with pytest.raises(DocumentUnreachableError):
            await store.fetch("https://cdn.example.com/cv.pdf")

    @pytest.mark.asyncio
    async def test_remote_connection_error_is_unreachable(self, tmp_path):
        def refuse(request):
            raise httpx.ConnectError("refused", request=request)

        store = remote_store(tmp_path, refuse)

        with pytest.raises(DocumentUnreachableError):
            await store.fetch("https://cdn.example.com/cv.pdf")


class TestDeleteAndHealth:
    @pytest.mark.asyncio
    async def test_delete(self, store):
        stored = await store.store(b"data", "cvs")

        assert await store.delete(stored.url) is True
        assert await store.delete(stored.url) is False
        with pytest.raises(DocumentNotFoundError):
            await store.fetch(stored.url)

    @pytest.mark.asyncio
    async def test_foreign_reference_is_not_deleted(self, store):
        assert await store.delete("https://cdn.example.com/cv.pdf") is False

    @pytest.mark.asyncio
    async def test_health(self, store):
        health = await store.check_health()

        assert health["status"] == "healthy"
        assert health["is_writable"] is True
