"""Dependency container for the candidate application service."""

from dataclasses import dataclass

from app.domain.repositories import ICandidateRepository


@dataclass
class CandidateDependencies:
    """Container for candidate service dependencies."""

    candidate_repository: ICandidateRepository


__all__ = ["CandidateDependencies"]
