"""Concrete factory for creating CandidateApplicationService dependencies."""

from __future__ import annotations

from app.application.dependencies.candidate_dependencies import CandidateDependencies
from app.infrastructure.providers.repository_provider import get_candidate_repository


async def get_candidate_dependencies() -> CandidateDependencies:
    return CandidateDependencies(candidate_repository=await get_candidate_repository())


__all__ = ["get_candidate_dependencies"]
