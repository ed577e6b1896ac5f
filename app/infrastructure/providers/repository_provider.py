"""Repository provider utilities."""

from __future__ import annotations

import asyncio
from typing import Callable, Dict, TypeVar

from app.database.sqlmodel_engine import SQLModelDatabaseManager, get_sqlmodel_db_manager
from app.domain.repositories import (
    IApplicationRepository,
    ICandidateRepository,
    ICVRepository,
    IJobRepository,
    ITailoredCVRepository,
    IUserRepository,
)
from app.infrastructure.persistence.repositories import (
    PostgresApplicationRepository,
    PostgresCandidateRepository,
    PostgresCVRepository,
    PostgresJobRepository,
    PostgresTailoredCVRepository,
    PostgresUserRepository,
)

T = TypeVar("T")

_repositories: Dict[str, object] = {}
_lock = asyncio.Lock()


async def _get_repository(name: str, factory: Callable[[SQLModelDatabaseManager], T]) -> T:
    if name in _repositories:
        return _repositories[name]  # type: ignore[return-value]

    async with _lock:
        if name not in _repositories:
            _repositories[name] = factory(get_sqlmodel_db_manager())
        return _repositories[name]  # type: ignore[return-value]


async def get_user_repository() -> IUserRepository:
    return await _get_repository("user", PostgresUserRepository)


async def get_job_repository() -> IJobRepository:
    return await _get_repository("job", PostgresJobRepository)


async def get_cv_repository() -> ICVRepository:
    return await _get_repository("cv", PostgresCVRepository)


async def get_tailored_cv_repository() -> ITailoredCVRepository:
    return await _get_repository("tailored_cv", PostgresTailoredCVRepository)


async def get_candidate_repository() -> ICandidateRepository:
    return await _get_repository("candidate", PostgresCandidateRepository)


async def get_application_repository() -> IApplicationRepository:
    return await _get_repository("application", PostgresApplicationRepository)


async def reset_repositories() -> None:
    async with _lock:
        _repositories.clear()


__all__ = [
    "get_application_repository",
    "get_candidate_repository",
    "get_cv_repository",
    "get_job_repository",
    "get_tailored_cv_repository",
    "get_user_repository",
    "reset_repositories",
]
