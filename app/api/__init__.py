"""
API Package

Central package for all API endpoints.

Note: Routers are imported lazily to avoid circular import issues with application services.
"""

from fastapi import APIRouter


def create_api_router() -> APIRouter:
    """
    Create and configure the main API router with all routes.

    Uses lazy imports to avoid circular dependencies between:
    - Application layer services
    - API schemas
    - API dependencies
    - API routers
    """
    from app.api.v1.applications import router as applications_router
    from app.api.v1.auth import router as auth_router
    from app.api.v1.candidates import router as candidates_router
    from app.api.v1.cvs import router as cvs_router
    from app.api.v1.health import router as health_router
    from app.api.v1.jobs import router as jobs_router
    from app.api.v1.tailored_cvs import router as tailored_cvs_router

    api_router = APIRouter()

    api_router.include_router(health_router)
    api_router.include_router(auth_router)
    api_router.include_router(jobs_router)
    api_router.include_router(cvs_router)
    api_router.include_router(candidates_router)
    api_router.include_router(applications_router)
    api_router.include_router(tailored_cvs_router)

    return api_router


__all__ = ["create_api_router"]
