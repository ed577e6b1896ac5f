"""
Remote Job Board Backend - Main FastAPI Application
"""

import logging
import sys
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import __version__
from app.api import create_api_router
from app.api.dependencies import map_domain_exception_to_http
from app.core.config import Settings, get_settings
from app.domain.exceptions import DomainException
from app.infrastructure.providers import reset_all_providers


def configure_logging(settings: Settings) -> None:
    """Configure structured logging"""
    use_console = settings.LOG_FORMAT == "console" and sys.stdout.isatty()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer() if use_console else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
        ),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    settings = get_settings()
    logger.info("Starting Remote Job Board API", version=app.version, environment=settings.ENVIRONMENT)

    try:
        from app.database import init_sqlmodel_database

        logger.info("Initializing database connection and tables")
        db_manager = await init_sqlmodel_database(settings)
        db_health = await db_manager.health_check()
        logger.info("Database initialized successfully", status=db_health["status"])
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        if settings.is_production():
            sys.exit(1)

    yield

    logger.info("Shutting down Remote Job Board API")
    try:
        from app.database import shutdown_sqlmodel_database

        await shutdown_sqlmodel_database()
        logger.info("Database shutdown completed")

        await reset_all_providers()
        logger.info("Service cleanup completed")
    except Exception as e:
        logger.error("Cleanup error", error=str(e))


def _validation_errors(exc: RequestValidationError):
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]


def _message_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message}, headers=headers)


def setup_exception_handlers(app: FastAPI) -> None:
    """Render every error as ``{"message": ...}``"""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _message_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.info("Request validation failed", path=request.url.path, errors=len(exc.errors()))
        return JSONResponse(
            status_code=422,
            content={"message": "Invalid request", "errors": _validation_errors(exc)},
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(request: Request, exc: DomainException):
        http_exc = map_domain_exception_to_http(exc)
        return _message_response(http_exc.status_code, str(http_exc.detail), http_exc.headers)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception",
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return _message_response(500, "Internal server error")


def setup_basic_middleware(app: FastAPI, settings: Settings) -> None:
    """Setup all middleware during app creation"""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition"],
    )


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    settings = get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.APP_NAME,
        description="Remote job board with AI tailored CV generation",
        version=__version__,
        docs_url="/docs" if not settings.is_production() else None,
        redoc_url="/redoc" if not settings.is_production() else None,
        openapi_url="/openapi.json" if not settings.is_production() else None,
        lifespan=lifespan,
    )

    setup_basic_middleware(app, settings)
    setup_exception_handlers(app)
    app.include_router(create_api_router())

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.ENVIRONMENT == "development",
        log_config=None,  # Use our structured logging
    )
