"""
API-specific dependencies for application services with dependency injection.

This module provides FastAPI dependency injection helpers for application services,
bridging the API layer with the hexagonal architecture's application services.
"""

from typing import Annotated

import structlog
from fastapi import Depends, HTTPException

from app.application.candidate_service import CandidateApplicationService
from app.application.cv_service import CVApplicationService
from app.application.job_application_service import JobApplicationService
from app.application.job_service import JobPostingService
from app.application.tailoring_service import TailoredCVApplicationService
from app.domain.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DependencyUnavailableError,
    DocumentCompositionError,
    DomainException,
    FileTooLargeError,
    NotFoundError,
    TailoringTimeoutError,
    UnsupportedMediaTypeError,
    ValidationError,
    WeakPasswordError,
)
from app.infrastructure.factories.candidate_dependency_factory import (
    get_candidate_dependencies,
)
from app.infrastructure.factories.cv_dependency_factory import get_cv_dependencies
from app.infrastructure.factories.job_application_dependency_factory import (
    get_job_application_dependencies,
)
from app.infrastructure.factories.job_dependency_factory import get_job_dependencies
from app.infrastructure.factories.tailoring_dependency_factory import (
    get_tailoring_dependencies,
)

logger = structlog.get_logger(__name__)


# Application Service Dependencies
async def get_tailoring_service() -> TailoredCVApplicationService:
    """Create TailoredCVApplicationService with injected dependencies."""
    try:
        dependencies = await get_tailoring_dependencies()
        return TailoredCVApplicationService(dependencies)
    except Exception as e:
        logger.error("Failed to create tailoring service", error=str(e))
        raise HTTPException(
            status_code=503,
            detail="Tailoring service unavailable"
        ) from e


async def get_job_service() -> JobPostingService:
    """Create JobPostingService with injected dependencies."""
    try:
        dependencies = await get_job_dependencies()
        return JobPostingService(dependencies)
    except Exception as e:
        logger.error("Failed to create job service", error=str(e))
        raise HTTPException(
            status_code=503,
            detail="Job service unavailable"
        ) from e


async def get_cv_service() -> CVApplicationService:
    """Create CVApplicationService with injected dependencies."""
    try:
        dependencies = await get_cv_dependencies()
        return CVApplicationService(dependencies)
    except Exception as e:
        logger.error("Failed to create CV service", error=str(e))
        raise HTTPException(
            status_code=503,
            detail="CV service unavailable"
        ) from e


async def get_candidate_service() -> CandidateApplicationService:
    """Create CandidateApplicationService with injected dependencies."""
    try:
        dependencies = await get_candidate_dependencies()
        return CandidateApplicationService(dependencies)
    except Exception as e:
        logger.error("Failed to create candidate service", error=str(e))
        raise HTTPException(
            status_code=503,
            detail="Candidate service unavailable"
        ) from e


async def get_job_application_service() -> JobApplicationService:
    """Create JobApplicationService with injected dependencies."""
    try:
        dependencies = await get_job_application_dependencies()
        return JobApplicationService(dependencies)
    except Exception as e:
        logger.error("Failed to create application service", error=str(e))
        raise HTTPException(
            status_code=503,
            detail="Application service unavailable"
        ) from e


# Type aliases for dependency injection
TailoringServiceDep = Annotated[TailoredCVApplicationService, Depends(get_tailoring_service)]
JobServiceDep = Annotated[JobPostingService, Depends(get_job_service)]
CVServiceDep = Annotated[CVApplicationService, Depends(get_cv_service)]
CandidateServiceDep = Annotated[CandidateApplicationService, Depends(get_candidate_service)]
JobApplicationServiceDep = Annotated[JobApplicationService, Depends(get_job_application_service)]


# Domain Exception Handlers
def map_domain_exception_to_http(exception: Exception) -> HTTPException:
    """Map domain exceptions to appropriate HTTP responses."""

    # Subclasses with their own status come before their parents
    if isinstance(exception, WeakPasswordError):
        return HTTPException(status_code=422, detail=str(exception))

    # ValidationError hierarchy - 400 Bad Request
    elif isinstance(exception, ValidationError):
        return HTTPException(status_code=400, detail=str(exception))

    # AuthenticationError - 401 Unauthorized
    elif isinstance(exception, AuthenticationError):
        return HTTPException(
            status_code=401,
            detail=str(exception),
            headers={"WWW-Authenticate": "Bearer"},
        )

    # AuthorizationError hierarchy - 403 Forbidden
    elif isinstance(exception, AuthorizationError):
        return HTTPException(status_code=403, detail=str(exception))

    # NotFoundError hierarchy - 404 Not Found
    elif isinstance(exception, NotFoundError):
        return HTTPException(status_code=404, detail=str(exception))

    # ConflictError - 409 Conflict
    elif isinstance(exception, ConflictError):
        return HTTPException(status_code=409, detail=str(exception))

    # Upload limits - 413 / 415
    elif isinstance(exception, FileTooLargeError):
        return HTTPException(status_code=413, detail=str(exception))

    elif isinstance(exception, UnsupportedMediaTypeError):
        return HTTPException(status_code=415, detail=str(exception))

    # DependencyUnavailableError hierarchy - 503 Service Unavailable
    elif isinstance(exception, DependencyUnavailableError):
        logger.error("Dependency unavailable", error=str(exception))
        return HTTPException(status_code=503, detail=str(exception))

    # Unparsable base document - 500, distinct from dependency failures
    elif isinstance(exception, DocumentCompositionError):
        return HTTPException(status_code=500, detail=str(exception))

    # Global time budget exceeded - 504 Gateway Timeout
    elif isinstance(exception, TailoringTimeoutError):
        return HTTPException(status_code=504, detail=str(exception))

    # Generic DomainException - 500 Internal Server Error
    elif isinstance(exception, DomainException):
        logger.error("Unhandled domain exception", exception_type=type(exception).__name__, error=str(exception))
        return HTTPException(status_code=500, detail="Domain operation failed")

    else:
        # Non-domain exception - log and return generic error
        logger.error("Non-domain exception in mapping", exception_type=type(exception).__name__, error=str(exception))
        return HTTPException(status_code=500, detail="Internal server error")


__all__ = [
    "get_tailoring_service",
    "get_job_service",
    "get_cv_service",
    "get_candidate_service",
    "get_job_application_service",
    "TailoringServiceDep",
    "JobServiceDep",
    "CVServiceDep",
    "CandidateServiceDep",
    "JobApplicationServiceDep",
    "map_domain_exception_to_http",
]
