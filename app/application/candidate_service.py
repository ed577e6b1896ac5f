"""Application service for recruiter-managed candidates."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List

import structlog

from app.domain.entities.candidate import Candidate
from app.domain.exceptions import CandidateNotFoundError, ConflictError
from app.domain.value_objects import CandidateId

if TYPE_CHECKING:
    from app.application.dependencies.candidate_dependencies import CandidateDependencies


logger = structlog.get_logger(__name__)


class CandidateApplicationService:
    def __init__(self, dependencies: CandidateDependencies) -> None:
        self._deps = dependencies

    async def create(self, first_name: str, last_name: str, email: str) -> Candidate:
        candidate = Candidate.create(first_name, last_name, email)
        if await self._deps.candidate_repository.get_by_email(candidate.email) is not None:
            raise ConflictError("Candidate with this email already exists")
        candidate = await self._deps.candidate_repository.save(candidate)
        logger.info("Candidate created", candidate_id=str(candidate.id))
        return candidate

    async def list(self) -> List[Candidate]:
        return await self._deps.candidate_repository.list()

    async def get(self, candidate_id: Any) -> Candidate:
        candidate = await self._deps.candidate_repository.get_by_id(self._parse_id(candidate_id))
        if candidate is None:
            raise CandidateNotFoundError()
        return candidate

    async def delete(self, candidate_id: Any) -> None:
        deleted = await self._deps.candidate_repository.delete(self._parse_id(candidate_id))
        if not deleted:
            raise CandidateNotFoundError()
        logger.info("Candidate deleted", candidate_id=str(candidate_id))

    @staticmethod
    def _parse_id(candidate_id: Any) -> CandidateId:
        try:
            return CandidateId(candidate_id)
        except (TypeError, ValueError) as exc:
            raise CandidateNotFoundError() from exc


__all__ = ["CandidateApplicationService"]
