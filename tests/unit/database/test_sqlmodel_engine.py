"""Tests for the SQLModel database manager that need no running database."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from app.database.sqlmodel_engine import SQLModelDatabaseManager
from app.domain.exceptions import DependencyUnavailableError, ValidationError


def _manager(settings, **overrides):
    return SQLModelDatabaseManager(settings.model_copy(update=overrides))


def _session_factory():
    session = MagicMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    return MagicMock(return_value=session), session


class TestDatabaseUrl:
    @pytest.mark.parametrize(
        "url",
        ["postgresql://u:p@db:5432/jobs", "postgres://u:p@db:5432/jobs"],
    )
    def test_uses_asyncpg_driver(self, settings, url):
        manager = _manager(settings, POSTGRES_URL=url)
        assert manager._build_database_url() == "postgresql+asyncpg://u:p@db:5432/jobs"

    def test_builds_from_parts(self, settings):
        manager = _manager(
            settings,
            POSTGRES_URL=None,
            POSTGRES_USER="board",
            POSTGRES_PASSWORD="secret",
            POSTGRES_HOST="pg",
            POSTGRES_PORT=5433,
            POSTGRES_DB="board",
        )
        assert manager._build_database_url() == "postgresql+asyncpg://board:secret@pg:5433/board"


class TestUninitialized:
    @pytest.mark.asyncio
    async def test_session_is_unavailable(self, settings):
        manager = SQLModelDatabaseManager(settings)

        with pytest.raises(DependencyUnavailableError):
            async with manager.get_session():
                pass

    @pytest.mark.asyncio
    async def test_create_tables_is_unavailable(self, settings):
        with pytest.raises(DependencyUnavailableError):
            await SQLModelDatabaseManager(settings).create_tables()

    @pytest.mark.asyncio
    async def test_health_check_reports_unhealthy(self, settings):
        health = await SQLModelDatabaseManager(settings).health_check()
        assert health["status"] == "unhealthy"


class TestSessionScope:
    @pytest.mark.asyncio
    async def test_commits_and_closes(self, settings):
        manager = SQLModelDatabaseManager(settings)
        manager.async_session_factory, session = _session_factory()

        async with manager.get_session() as active:
            assert active is session

        session.commit.assert_awaited_once()
        session.rollback.assert_not_awaited()
        session.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_connectivity_error_becomes_unavailable(self, settings):
        manager = SQLModelDatabaseManager(settings)
        manager.async_session_factory, session = _session_factory()

        with pytest.raises(DependencyUnavailableError):
            async with manager.get_session():
                raise OperationalError("SELECT 1", {}, ConnectionRefusedError("refused"))

        session.rollback.assert_awaited_once()
        session.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_domain_errors_propagate_after_rollback(self, settings):
        manager = SQLModelDatabaseManager(settings)
        manager.async_session_factory, session = _session_factory()

        with pytest.raises(ValidationError):
            async with manager.get_session():
                raise ValidationError("bad row")

        session.commit.assert_not_awaited()
        session.rollback.assert_awaited_once()
