"""Fixtures for driving the ASGI app over httpx with in-memory collaborators."""

from __future__ import annotations

from uuid import uuid4

import httpx
import pytest

from app.api.dependencies import get_job_application_service, get_tailoring_service
from app.application.auth_service import AuthApplicationService
from app.application.cv_service import CVApplicationService
from app.application.dependencies.auth_dependencies import AuthDependencies
from app.application.dependencies.cv_dependencies import CVDependencies
from app.application.dependencies.job_application_dependencies import JobApplicationDependencies
from app.application.dependencies.tailoring_dependencies import TailoringDependencies
from app.application.job_application_service import JobApplicationService
from app.application.tailoring_service import TailoredCVApplicationService
from app.core.config import TailoringConfig
from app.core.dependencies import get_auth_service, get_current_user
from app.domain.entities.user import UserRole
from app.domain.value_objects import UserId
from app.main import app as fastapi_app
from app.utils.security import CurrentUser, PasswordManager, TokenManager
from tests.mocks.mock_repositories import (
    MockApplicationRepository,
    MockCVRepository,
    MockJobRepository,
    MockTailoredCVRepository,
    MockUserRepository,
)
from tests.mocks.mock_services import (
    MockDocumentStore,
    MockSummaryGenerator,
    SpyDocumentComposer,
    SpyTextExtractor,
)


@pytest.fixture
def current_user():
    return CurrentUser(user_id=UserId(uuid4()), email="jane@example.com", role=UserRole.USER)


@pytest.fixture
def backend():
    """In-memory repositories and adapters shared by every overridden service."""
    return {
        "users": MockUserRepository(),
        "jobs": MockJobRepository(),
        "cvs": MockCVRepository(),
        "tailored": MockTailoredCVRepository(),
        "applications": MockApplicationRepository(),
        "store": MockDocumentStore(),
        "generator": MockSummaryGenerator(),
        "composer": SpyDocumentComposer(),
    }


@pytest.fixture
def tailoring_service(backend):
    return TailoredCVApplicationService(
        TailoringDependencies(
            job_repository=backend["jobs"],
            cv_repository=backend["cvs"],
            tailored_cv_repository=backend["tailored"],
            document_store=backend["store"],
            text_extractor=SpyTextExtractor(),
            summary_generator=backend["generator"],
            document_composer=backend["composer"],
            config=TailoringConfig(output_folder="tailored", timeout_seconds=30),
        )
    )


@pytest.fixture
def auth_service(backend, settings):
    return AuthApplicationService(
        AuthDependencies(
            user_repository=backend["users"],
            password_manager=PasswordManager(settings),
            token_manager=TokenManager(settings),
        )
    )


@pytest.fixture
def application_service(backend):
    cv_service = CVApplicationService(
        CVDependencies(
            cv_repository=backend["cvs"],
            document_store=backend["store"],
            upload_folder="cvs",
            max_file_size=1024 * 1024,
        )
    )
    return JobApplicationService(
        JobApplicationDependencies(
            application_repository=backend["applications"],
            job_repository=backend["jobs"],
            cv_repository=backend["cvs"],
            tailored_cv_repository=backend["tailored"],
            cv_service=cv_service,
        )
    )


@pytest.fixture
def app(current_user, tailoring_service, auth_service, application_service):
    fastapi_app.dependency_overrides[get_current_user] = lambda: current_user
    fastapi_app.dependency_overrides[get_tailoring_service] = lambda: tailoring_service
    fastapi_app.dependency_overrides[get_auth_service] = lambda: auth_service
    fastapi_app.dependency_overrides[get_job_application_service] = lambda: application_service
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http_client:
        yield http_client
