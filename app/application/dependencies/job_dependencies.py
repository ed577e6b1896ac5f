"""Dependency container for the job posting application service."""

from dataclasses import dataclass

from app.domain.repositories import IJobRepository


@dataclass
class JobDependencies:
    """Container for job service dependencies."""

    job_repository: IJobRepository


__all__ = ["JobDependencies"]
