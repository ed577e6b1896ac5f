"""Service banner and health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter

from app import __version__
from app.core.dependencies import SettingsDep
from app.database import get_sqlmodel_db_manager
from app.infrastructure.providers.ai_provider import get_summary_generator
from app.infrastructure.providers.storage_provider import get_document_store

router = APIRouter(tags=["health"])


@router.get("/")
async def root(settings: SettingsDep):
    """API root endpoint"""
    return {
        "message": f"{settings.APP_NAME} is running",
        "version": __version__,
        "docs_url": "/docs" if not settings.is_production() else None,
    }


@router.get("/health")
async def health_check(settings: SettingsDep):
    """Basic health check endpoint"""
    return {
        "status": "healthy",
        "version": __version__,
        "environment": settings.ENVIRONMENT,
        "time": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/health/detailed")
async def detailed_health_check(settings: SettingsDep):
    """Detailed health check including database, storage and summary generation"""
    health_status = {
        "status": "healthy",
        "version": __version__,
        "environment": settings.ENVIRONMENT,
        "time": datetime.now(timezone.utc).isoformat(),
        "services": {},
    }

    health_status["services"]["database"] = await get_sqlmodel_db_manager().health_check()

    try:
        store = await get_document_store()
        health_status["services"]["storage"] = await store.check_health()
    except Exception as e:
        health_status["services"]["storage"] = {"status": "unhealthy", "error": str(e)}

    generator = await get_summary_generator()
    health_status["services"]["summary_generator"] = await generator.check_health()

    if any(
        service.get("status") == "unhealthy"
        for service in health_status["services"].values()
    ):
        health_status["status"] = "unhealthy"

    return health_status
