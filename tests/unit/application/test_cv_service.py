"""Tests for base CV upload, download and deletion."""

from uuid import uuid4

import pytest

from app.application.cv_service import CVApplicationService, UploadedFile
from app.application.dependencies.cv_dependencies import CVDependencies
from app.domain.entities.cv_document import DOCX_MIME_TYPE, PDF_MIME_TYPE
from app.domain.exceptions import (
    CVNotFoundError,
    DependencyUnavailableError,
    DocumentUnreachableError,
    FileTooLargeError,
    StorageUnavailableError,
    UnsupportedMediaTypeError,
    ValidationError,
)
from app.domain.value_objects import UserId
from tests.fixtures.pdf_fixtures import build_pdf
from tests.mocks.mock_repositories import MockCVRepository
from tests.mocks.mock_services import MockDocumentStore


@pytest.fixture
def cv_repository():
    return MockCVRepository()


@pytest.fixture
def document_store():
    return MockDocumentStore()


@pytest.fixture
def service(cv_repository, document_store):
    return CVApplicationService(
        CVDependencies(
            cv_repository=cv_repository,
            document_store=document_store,
            upload_folder="cvs",
            max_file_size=1024 * 1024,
        )
    )


@pytest.fixture
def user_id():
    return UserId(uuid4())


def pdf_upload(name="resume.pdf", content=None):
    return UploadedFile(filename=name, content_type=PDF_MIME_TYPE, content=content or build_pdf())


class TestUploadValidation:
    def test_missing_file(self, service):
        with pytest.raises(ValidationError, match="No file uploaded"):
            service.validate_upload(None)

    def test_rejects_non_document_types(self, service):
        upload = UploadedFile(filename="photo.png", content_type="image/png", content=b"\x89PNG")
        with pytest.raises(UnsupportedMediaTypeError):
            service.validate_upload(upload)

    def test_rejects_oversized_file(self, service):
        with pytest.raises(FileTooLargeError):
            service.validate_upload(pdf_upload(content=b"%PDF" + b"0" * (1024 * 1024)))

    def test_rejects_empty_file(self, service):
        upload = UploadedFile(filename="empty.pdf", content_type=PDF_MIME_TYPE, content=b"")
        with pytest.raises(ValidationError, match="empty"):
            service.validate_upload(upload)

    def test_accepts_word_documents(self, service):
        upload = UploadedFile(filename="cv.docx", content_type=DOCX_MIME_TYPE, content=b"PK\x03\x04")
        service.validate_upload(upload)


class TestUpload:
    @pytest.mark.asyncio
    async def test_stores_then_records(self, service, user_id, cv_repository, document_store):
        cv = await service.upload(user_id, pdf_upload("../../etc/resume.pdf"))

        assert cv.filename == "resume.pdf"
        assert cv.mimetype == PDF_MIME_TYPE
        assert cv.file_url in document_store.documents
        assert cv.file_url.endswith(".pdf")
        assert cv_repository.cvs[cv.id] is cv

    @pytest.mark.asyncio
    async def test_storage_failure_records_nothing(self, service, user_id, cv_repository, document_store):
        document_store.fail_store = True

        with pytest.raises(StorageUnavailableError):
            await service.upload(user_id, pdf_upload())

        assert cv_repository.cvs == {}


class TestRetrieval:
    @pytest.mark.asyncio
    async def test_list_only_returns_own_cvs(self, service, user_id):
        await service.upload(user_id, pdf_upload("a.pdf"))
        await service.upload(UserId(uuid4()), pdf_upload("b.pdf"))

        cvs = await service.list_for_user(user_id)

        assert [cv.filename for cv in cvs] == ["a.pdf"]

    @pytest.mark.asyncio
    async def test_get_document_returns_bytes(self, service, user_id):
        content = build_pdf(["Resume"])
        cv = await service.upload(user_id, pdf_upload(content=content))

        loaded, data = await service.get_document(str(cv.id), user_id)

        assert loaded.id == cv.id
        assert data == content

    @pytest.mark.asyncio
    @pytest.mark.parametrize("cv_id", ["not-a-uuid", str(uuid4())])
    async def test_unknown_or_malformed_id_is_not_found(self, service, user_id, cv_id):
        with pytest.raises(CVNotFoundError):
            await service.get_document(cv_id, user_id)

    @pytest.mark.asyncio
    async def test_foreign_cv_is_not_found(self, service, user_id):
        cv = await service.upload(user_id, pdf_upload())

        with pytest.raises(CVNotFoundError):
            await service.get_owned(str(cv.id), UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_missing_file_is_not_found(self, service, user_id, document_store):
        cv = await service.upload(user_id, pdf_upload())
        del document_store.documents[cv.file_url]

        with pytest.raises(CVNotFoundError, match="CV file not found"):
            await service.get_document(str(cv.id), user_id)

    @pytest.mark.asyncio
    async def test_unreachable_store_is_unavailable(self, service, user_id, document_store):
        cv = await service.upload(user_id, pdf_upload())
        document_store.fail_fetch_with = DocumentUnreachableError()

        with pytest.raises(DependencyUnavailableError):
            await service.get_document(str(cv.id), user_id)


class TestDelete:
    @pytest.mark.asyncio
    async def test_removes_record_and_file(self, service, user_id, cv_repository, document_store):
        cv = await service.upload(user_id, pdf_upload())

        await service.delete(str(cv.id), user_id)

        assert cv.id not in cv_repository.cvs
        assert cv.file_url not in document_store.documents

    @pytest.mark.asyncio
    async def test_cannot_delete_foreign_cv(self, service, user_id, cv_repository):
        cv = await service.upload(user_id, pdf_upload())

        with pytest.raises(CVNotFoundError):
            await service.delete(str(cv.id), UserId(uuid4()))

        assert cv.id in cv_repository.cvs
