"""Tests for job posting and candidate CRUD services."""

from uuid import uuid4

import pytest

from app.application.candidate_service import CandidateApplicationService
from app.application.dependencies.candidate_dependencies import CandidateDependencies
from app.application.dependencies.job_dependencies import JobDependencies
from app.application.job_service import MAX_PAGE_SIZE, JobPostingService
from app.domain.exceptions import (
    CandidateNotFoundError,
    ConflictError,
    JobNotFoundError,
    ValidationError,
)
from tests.mocks.mock_repositories import MockCandidateRepository, MockJobRepository


@pytest.fixture
def job_repository():
    return MockJobRepository()


@pytest.fixture
def job_service(job_repository):
    return JobPostingService(JobDependencies(job_repository=job_repository))


@pytest.fixture
def candidate_service():
    return CandidateApplicationService(
        CandidateDependencies(candidate_repository=MockCandidateRepository())
    )


class TestJobPostingService:
    @pytest.mark.asyncio
    async def test_create_and_get(self, job_service):
        job = await job_service.create_job("  Platform Engineer ", company="Acme", type="full-time")

        loaded = await job_service.get_job(str(job.id))

        assert loaded.title == "Platform Engineer"
        assert loaded.status == "open"

    @pytest.mark.asyncio
    async def test_title_required(self, job_service):
        with pytest.raises(ValidationError):
            await job_service.create_job("   ")

    @pytest.mark.asyncio
    async def test_list_clamps_paging(self, job_service, job_repository):
        await job_service.list_jobs(limit=10_000, offset=-5)

        assert job_repository.call_log[-1] == ("list", None, None, MAX_PAGE_SIZE, 0)

    @pytest.mark.asyncio
    async def test_list_filters_by_type(self, job_service):
        await job_service.create_job("Remote", type="contract")
        await job_service.create_job("Office", type="full-time")

        jobs = await job_service.list_jobs(job_type="contract")

        assert [job.title for job in jobs] == ["Remote"]

    @pytest.mark.asyncio
    async def test_update_status(self, job_service):
        job = await job_service.create_job("Analyst")

        updated = await job_service.update_status(str(job.id), "closed")

        assert updated.status == "closed"
        assert updated.updated_at is not None

    @pytest.mark.asyncio
    async def test_update_status_requires_value(self, job_service):
        job = await job_service.create_job("Analyst")

        with pytest.raises(ValidationError, match="Status is required"):
            await job_service.update_status(str(job.id), "")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("job_id", ["123", str(uuid4())])
    async def test_missing_job(self, job_service, job_id):
        with pytest.raises(JobNotFoundError):
            await job_service.get_job(job_id)
        with pytest.raises(JobNotFoundError):
            await job_service.delete_job(job_id)

    @pytest.mark.asyncio
    async def test_delete(self, job_service, job_repository):
        job = await job_service.create_job("Temp")

        await job_service.delete_job(str(job.id))

        assert job.id not in job_repository.jobs


class TestCandidateService:
    @pytest.mark.asyncio
    async def test_create_list_get_delete(self, candidate_service):
        candidate = await candidate_service.create("Ada", "Lovelace", "ada@example.com")

        assert candidate.full_name == "Ada Lovelace"
        assert [c.id for c in await candidate_service.list()] == [candidate.id]
        assert (await candidate_service.get(str(candidate.id))).email == candidate.email

        await candidate_service.delete(str(candidate.id))
        with pytest.raises(CandidateNotFoundError):
            await candidate_service.get(str(candidate.id))

    @pytest.mark.asyncio
    async def test_duplicate_email(self, candidate_service):
        await candidate_service.create("Ada", "Lovelace", "ada@example.com")

        with pytest.raises(ConflictError):
            await candidate_service.create("Ada", "King", "ADA@example.com")

    @pytest.mark.asyncio
    async def test_required_fields(self, candidate_service):
        with pytest.raises(ValidationError):
            await candidate_service.create("", "Lovelace", "ada@example.com")

    @pytest.mark.asyncio
    async def test_delete_unknown(self, candidate_service):
        with pytest.raises(CandidateNotFoundError):
            await candidate_service.delete("not-a-uuid")
