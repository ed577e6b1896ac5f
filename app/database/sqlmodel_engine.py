"""
SQLModel database engine and session management.

This module provides SQLAlchemy/SQLModel database initialization, connection pooling,
and async session management for PostgreSQL.
"""

from typing import Optional, AsyncGenerator, Dict, Any
from contextlib import asynccontextmanager
import asyncio
import structlog
from sqlalchemy.exc import DisconnectionError, InterfaceError, OperationalError
from sqlalchemy.exc import TimeoutError as SQLAlchemyTimeoutError
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, AsyncEngine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.sql import text
from sqlmodel import SQLModel

from app.core.config import Settings
from app.domain.exceptions import DependencyUnavailableError

logger = structlog.get_logger(__name__)

# Failures that mean "the database could not be reached", not "the query was wrong"
_UNAVAILABLE_ERRORS = (
    OperationalError,
    InterfaceError,
    DisconnectionError,
    SQLAlchemyTimeoutError,
    asyncio.TimeoutError,
    ConnectionError,
)


class SQLModelDatabaseManager:
    """
    SQLModel database manager with async session support.

    Provides SQLAlchemy engine and session management for the application.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.engine: Optional[AsyncEngine] = None
        self.async_session_factory: Optional[sessionmaker] = None
        self._initialized = False

    def _build_database_url(self) -> str:
        """
        Build SQLAlchemy async database URL from settings.

        Converts PostgreSQL URL to SQLAlchemy async format.
        """
        url = str(self.settings.get_postgres_url())
        if url.startswith("postgresql://"):
            return url.replace("postgresql://", "postgresql+asyncpg://", 1)
        elif url.startswith("postgres://"):
            return url.replace("postgres://", "postgresql+asyncpg://", 1)
        return url

    async def initialize(self) -> None:
        """
        Initialize SQLModel engine and session factory.

        Verifies connectivity with a trivial query before reporting ready.
        """
        if self._initialized:
            logger.warning("SQLModel database manager already initialized")
            return

        database_url = self._build_database_url()
        timeout = self.settings.DATABASE_TIMEOUT_SECONDS

        try:
            self.engine = create_async_engine(
                database_url,
                pool_size=10,
                max_overflow=20,
                pool_timeout=timeout,
                pool_recycle=3600,  # Recycle connections every hour
                pool_pre_ping=True,
                echo=False,
                future=True,
                connect_args={
                    "timeout": timeout,
                    "command_timeout": timeout,
                    "server_settings": {
                        "application_name": "remote-job-board",
                    },
                },
            )

            self.async_session_factory = sessionmaker(
                bind=self.engine,
                class_=AsyncSession,
                expire_on_commit=False,  # Keep objects usable after commit
                autoflush=True,
                autocommit=False
            )

            async with self.engine.begin() as conn:
                await conn.execute(text("SELECT 1"))

            self._initialized = True
            logger.info(
                "SQLModel database manager initialized successfully",
                database_url=database_url.split("@")[0].rsplit(":", 1)[0] + ":***@***"
            )

        except Exception as e:
            logger.error("Failed to initialize SQLModel database manager", error=str(e))
            raise

    async def create_tables(self) -> None:
        """
        Create all SQLModel tables.

        Schema migration tooling is out of scope; tables are created on startup.
        """
        if not self.engine:
            raise DependencyUnavailableError("Database not initialized")

        try:
            async with self.engine.begin() as conn:
                # Import all models to ensure they're registered
                import app.infrastructure.persistence.models  # noqa: F401

                await conn.run_sync(SQLModel.metadata.create_all)

            logger.info("SQLModel tables created successfully")

        except Exception as e:
            logger.error("Failed to create SQLModel tables", error=str(e))
            raise

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Get async database session with automatic commit/rollback.

        Connectivity failures surface as ``DependencyUnavailableError``.

        Usage:
            async with db_manager.get_session() as session:
                result = await session.execute(select(UserTable))
        """
        if not self.async_session_factory:
            raise DependencyUnavailableError("Database not initialized")

        session = self.async_session_factory()
        try:
            yield session
            await session.commit()
        except _UNAVAILABLE_ERRORS as e:
            await session.rollback()
            logger.error("Database unavailable", error=str(e))
            raise DependencyUnavailableError("Database unavailable") from e
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def health_check(self) -> Dict[str, Any]:
        """
        Perform health check on SQLModel database connection.
        """
        if not self.engine:
            return {
                "status": "unhealthy",
                "error": "Database manager not initialized"
            }

        try:
            async with self.engine.begin() as conn:
                await conn.execute(text("SELECT 1 as health_check"))

            pool = self.engine.pool
            return {
                "status": "healthy",
                "pool_size": pool.size(),
                "checked_out": pool.checkedout(),
            }

        except Exception as e:
            logger.error("SQLModel database health check failed", error=str(e))
            return {
                "status": "unhealthy",
                "error": str(e)
            }

    async def shutdown(self) -> None:
        """
        Shutdown SQLModel database manager and close connections.
        """
        if self.engine:
            try:
                await self.engine.dispose()
                logger.info("SQLModel database manager shut down successfully")
            except Exception as e:
                logger.error("Error during SQLModel database shutdown", error=str(e))
            finally:
                self.engine = None
                self.async_session_factory = None
                self._initialized = False


# Global SQLModel database manager instance
_sqlmodel_db_manager: Optional[SQLModelDatabaseManager] = None


def get_sqlmodel_db_manager(settings: Optional[Settings] = None) -> SQLModelDatabaseManager:
    """
    Get global SQLModel database manager instance.

    Creates the instance on first call with provided settings.
    Subsequent calls return the existing instance.
    """
    global _sqlmodel_db_manager

    if _sqlmodel_db_manager is None:
        if settings is None:
            from app.core.config import get_settings
            settings = get_settings()
        _sqlmodel_db_manager = SQLModelDatabaseManager(settings)

    return _sqlmodel_db_manager


async def init_sqlmodel_database(settings: Optional[Settings] = None) -> SQLModelDatabaseManager:
    """
    Initialize global SQLModel database manager and create tables.

    Call this during application startup to set up the database connection.
    """
    db_manager = get_sqlmodel_db_manager(settings)
    await db_manager.initialize()
    await db_manager.create_tables()
    return db_manager


async def shutdown_sqlmodel_database() -> None:
    """
    Shutdown global SQLModel database manager.

    Call this during application shutdown to clean up connections.
    """
    global _sqlmodel_db_manager
    if _sqlmodel_db_manager:
        await _sqlmodel_db_manager.shutdown()
        _sqlmodel_db_manager = None
