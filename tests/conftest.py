"""Pytest fixtures for provider-based architecture."""

from __future__ import annotations

import os
import tempfile
from collections.abc import AsyncIterator

# Settings are read once per process; pin a deterministic test environment
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-at-least-32-characters")
os.environ.setdefault("ENVIRONMENT", "local")
os.environ.setdefault("LOG_FORMAT", "json")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("STORAGE_PATH", tempfile.mkdtemp(prefix="jobboard-test-storage-"))
os.environ["LLM_API_KEY"] = ""

import pytest  # noqa: E402

from app.core.config import Settings, get_settings  # noqa: E402
from app.infrastructure.providers import reset_all_providers  # noqa: E402


@pytest.fixture(autouse=True)
async def reset_provider_state() -> AsyncIterator[None]:
    """Ensure each test starts with clean provider singletons."""
    await reset_all_providers()
    yield
    await reset_all_providers()


@pytest.fixture
def settings() -> Settings:
    return get_settings()
