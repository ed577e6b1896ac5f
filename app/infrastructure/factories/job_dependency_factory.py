"""Concrete factory for creating JobPostingService dependencies."""

from __future__ import annotations

from app.application.dependencies.job_dependencies import JobDependencies
from app.infrastructure.providers.repository_provider import get_job_repository


async def get_job_dependencies() -> JobDependencies:
    return JobDependencies(job_repository=await get_job_repository())


__all__ = ["get_job_dependencies"]
