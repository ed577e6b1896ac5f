"""Tests for applying to jobs and reviewing applications."""

from uuid import uuid4

import pytest

from app.application.cv_service import CVApplicationService, UploadedFile
from app.application.dependencies.cv_dependencies import CVDependencies
from app.application.dependencies.job_application_dependencies import JobApplicationDependencies
from app.application.job_application_service import JobApplicationService
from app.domain.entities.cv_document import PDF_MIME_TYPE, CVDocument
from app.domain.entities.job import Job
from app.domain.entities.job_application import ApplicationStatus
from app.domain.entities.tailored_cv import TailoredCV
from app.domain.exceptions import (
    ApplicationNotFoundError,
    AuthorizationError,
    ConflictError,
    CVNotFoundError,
    JobNotFoundError,
    ValidationError,
)
from app.domain.value_objects import Summary, UserId
from tests.fixtures.pdf_fixtures import build_pdf
from tests.mocks.mock_repositories import (
    MockApplicationRepository,
    MockCVRepository,
    MockJobRepository,
    MockTailoredCVRepository,
)
from tests.mocks.mock_services import MockDocumentStore


@pytest.fixture
def user_id():
    return UserId(uuid4())


@pytest.fixture
def repos():
    return {
        "applications": MockApplicationRepository(),
        "jobs": MockJobRepository(),
        "cvs": MockCVRepository(),
        "tailored": MockTailoredCVRepository(),
    }


@pytest.fixture
def service(repos):
    cv_service = CVApplicationService(
        CVDependencies(
            cv_repository=repos["cvs"],
            document_store=MockDocumentStore(),
            upload_folder="cvs",
            max_file_size=1024 * 1024,
        )
    )
    return JobApplicationService(
        JobApplicationDependencies(
            application_repository=repos["applications"],
            job_repository=repos["jobs"],
            cv_repository=repos["cvs"],
            tailored_cv_repository=repos["tailored"],
            cv_service=cv_service,
        )
    )


@pytest.fixture
def job(repos):
    return repos["jobs"].add(Job.create("Data Engineer"))


@pytest.fixture
def cv(repos, user_id):
    return repos["cvs"].add(CVDocument.create(user_id, "cv.pdf", PDF_MIME_TYPE, "mem://cvs/cv.pdf"))


class TestApply:
    @pytest.mark.asyncio
    async def test_apply_with_existing_cv(self, service, user_id, job, cv):
        application = await service.apply(user_id, str(job.id), cv_id=str(cv.id))

        assert application.job_id == job.id
        assert application.cv_id == cv.id
        assert application.status == ApplicationStatus.PENDING
        assert application.tailored_cv_id is None

    @pytest.mark.asyncio
    async def test_apply_with_upload_stores_cv(self, service, repos, user_id, job):
        upload = UploadedFile(filename="fresh.pdf", content_type=PDF_MIME_TYPE, content=build_pdf())

        application = await service.apply(user_id, str(job.id), upload=upload)

        assert repos["cvs"].cvs[application.cv_id].filename == "fresh.pdf"

    @pytest.mark.asyncio
    async def test_apply_with_own_tailored_cv(self, service, repos, user_id, job, cv):
        tailored = repos["tailored"].add(
            TailoredCV.create(user_id, cv.id, job.id, file_url="mem://t", summary=Summary("s", True))
        )

        application = await service.apply(
            user_id, str(job.id), cv_id=str(cv.id), tailored_cv_id=str(tailored.id)
        )

        assert application.tailored_cv_id == tailored.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("tailored_cv_id", ["bogus", str(uuid4())])
    async def test_rejects_unknown_tailored_cv(self, service, user_id, job, cv, tailored_cv_id):
        with pytest.raises(AuthorizationError, match="Invalid tailored CV"):
            await service.apply(user_id, str(job.id), cv_id=str(cv.id), tailored_cv_id=tailored_cv_id)

    @pytest.mark.asyncio
    async def test_requires_a_cv(self, service, user_id, job):
        with pytest.raises(ValidationError, match="CV file or cv_id is required"):
            await service.apply(user_id, str(job.id))

    @pytest.mark.asyncio
    async def test_foreign_cv(self, service, job, cv):
        with pytest.raises(CVNotFoundError):
            await service.apply(UserId(uuid4()), str(job.id), cv_id=str(cv.id))

    @pytest.mark.asyncio
    @pytest.mark.parametrize("job_id", ["nope", str(uuid4())])
    async def test_unknown_job(self, service, user_id, cv, job_id):
        with pytest.raises(JobNotFoundError):
            await service.apply(user_id, job_id, cv_id=str(cv.id))

    @pytest.mark.asyncio
    async def test_cannot_apply_twice(self, service, user_id, job, cv):
        await service.apply(user_id, str(job.id), cv_id=str(cv.id))

        with pytest.raises(ConflictError, match="already applied"):
            await service.apply(user_id, str(job.id), cv_id=str(cv.id))


class TestReview:
    @pytest.mark.asyncio
    async def test_update_status(self, service, user_id, job, cv):
        application = await service.apply(user_id, str(job.id), cv_id=str(cv.id))

        updated = await service.update_status(str(application.id), "Shortlisted")

        assert updated.status == ApplicationStatus.SHORTLISTED
        assert updated.updated_at is not None

    @pytest.mark.asyncio
    async def test_invalid_status(self, service, user_id, job, cv):
        application = await service.apply(user_id, str(job.id), cv_id=str(cv.id))

        with pytest.raises(ValidationError, match="Invalid status value"):
            await service.update_status(str(application.id), "promoted")

    @pytest.mark.asyncio
    async def test_unknown_application(self, service):
        with pytest.raises(ApplicationNotFoundError):
            await service.update_status(str(uuid4()), "reviewed")

    @pytest.mark.asyncio
    async def test_listing(self, service, user_id, job, cv):
        await service.apply(user_id, str(job.id), cv_id=str(cv.id))

        mine = await service.list_for_user(user_id)
        everyone = await service.list_all()

        assert len(mine) == 1
        assert mine[0].user_id is None
        assert everyone[0].user_id == user_id
