"""Application layer orchestrator for tailored CV generation.

One request runs the pipeline::

    validate -> load job -> load base CV -> fetch bytes -> check reuse
             -> extract text -> generate summary -> compose -> store -> persist

Text extraction and summary generation degrade softly; composition and
storage failures are fatal and leave no outcome row behind. The whole run
is bounded by the configured time budget.
"""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, List, Optional, Tuple, Type, TypeVar
from uuid import uuid4

import structlog

from app.domain.entities.cv_document import CVDocument
from app.domain.entities.job import Job
from app.domain.entities.tailored_cv import TailoredCV
from app.domain.exceptions import (
    AuthenticationError,
    BaseDocumentInaccessibleError,
    BaseDocumentNotFoundError,
    ConflictError,
    DependencyUnavailableError,
    DocumentCompositionError,
    DocumentNotFoundError,
    DocumentUnreachableError,
    DomainException,
    JobNotFoundError,
    NotFoundError,
    TailoredCVNotFoundError,
    TailoringTimeoutError,
    ValidationError,
)
from app.domain.value_objects import CVId, JobId, Summary, TailoredCVId, UserId

if TYPE_CHECKING:
    from app.application.dependencies.tailoring_dependencies import TailoringDependencies


logger = structlog.get_logger(__name__)

IdT = TypeVar("IdT")

PDF_EXTENSION = ".pdf"


@dataclass(frozen=True)
class TailoringRequest:
    """Input of one tailoring run. Identifiers arrive as raw client values."""

    owner_id: Optional[Any]
    cv_id: Optional[Any]
    job_id: Optional[Any]
    force: bool = False


@dataclass(frozen=True)
class TailoringResult:
    tailored_cv: TailoredCV
    reused: bool


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_id(id_type: Type[IdT], value: Any, not_found: Type[NotFoundError]) -> IdT:
    # A malformed identifier cannot match any row
    try:
        return id_type(value)  # type: ignore[call-arg]
    except (TypeError, ValueError) as exc:
        raise not_found() from exc


def tailored_public_id(
    user_id: UserId,
    cv_id: CVId,
    job_id: JobId,
    generation: Optional[str] = None,
) -> str:
    """Object name for one generation; each run writes a new object."""
    suffix = generation or uuid4().hex
    return f"tailored_cv_{user_id.value.hex}_{cv_id.value.hex}_{job_id.value.hex}_{suffix}"


class TailoredCVApplicationService:
    """Coordinates the tailored CV pipeline and the outcome read model.

    Collaborators are injected through ``TailoringDependencies``; the
    service owns no state between requests.
    """

    def __init__(self, dependencies: TailoringDependencies) -> None:
        self._deps = dependencies
        self._logger = structlog.get_logger(__name__)

    async def tailor(self, request: TailoringRequest) -> TailoringResult:
        """Return a reusable outcome or generate (or regenerate) one.

        Raises:
            AuthenticationError: no owner on the request
            ValidationError: ``cv_id`` or ``job_id`` missing, or the base
                CV bytes could not be fetched
            NotFoundError: unknown job, or a base CV the owner does not have
            DocumentCompositionError: the base CV is not a usable PDF
            StorageUnavailableError: the generated document could not be stored
            TailoringTimeoutError: the run exceeded its time budget
        """
        user_id, cv_id, job_id = self._validate(request)
        budget = self._deps.config.timeout_seconds

        try:
            return await asyncio.wait_for(
                self._run(user_id, cv_id, job_id, request.force),
                timeout=budget,
            )
        except asyncio.TimeoutError as exc:
            self._logger.error(
                "Tailored CV generation timed out",
                user_id=str(user_id),
                cv_id=str(cv_id),
                job_id=str(job_id),
                timeout_seconds=budget,
            )
            raise TailoringTimeoutError() from exc

    def _validate(self, request: TailoringRequest) -> Tuple[UserId, CVId, JobId]:
        if _is_missing(request.owner_id):
            raise AuthenticationError()
        if _is_missing(request.cv_id) or _is_missing(request.job_id):
            raise ValidationError("cv_id and job_id are required")

        try:
            user_id = UserId(request.owner_id)
        except (TypeError, ValueError) as exc:
            raise AuthenticationError() from exc

        job_id = _parse_id(JobId, request.job_id, JobNotFoundError)
        cv_id = _parse_id(CVId, request.cv_id, BaseDocumentNotFoundError)
        return user_id, cv_id, job_id

    async def _run(
        self,
        user_id: UserId,
        cv_id: CVId,
        job_id: JobId,
        force: bool,
    ) -> TailoringResult:
        started = time.monotonic()
        log = self._logger.bind(user_id=str(user_id), cv_id=str(cv_id), job_id=str(job_id))

        job = await self._load_job(job_id)
        base_cv = await self._load_base_cv(cv_id, user_id)
        base_bytes = await self._fetch_base_bytes(base_cv, log)

        existing = await self._deps.tailored_cv_repository.get_for_triple(user_id, cv_id, job_id)
        if existing is not None and existing.should_reuse(force):
            log.info("Reusing tailored CV", tailored_cv_id=str(existing.id))
            existing.job_title = job.title
            return TailoringResult(tailored_cv=existing, reused=True)

        summary = await self._summarize(job, base_bytes, log)
        document = await self._compose(base_bytes, job.title, summary, log)

        stored = await self._deps.document_store.store(
            document,
            self._deps.config.output_folder,
            public_id=tailored_public_id(user_id, cv_id, job_id),
            extension=PDF_EXTENSION,
        )

        previous_url = existing.file_url if existing is not None and existing.has_document else None
        if existing is not None:
            existing.regenerate(file_url=stored.url, summary=summary)
            outcome = existing
        else:
            outcome = TailoredCV.create(user_id, cv_id, job_id, file_url=stored.url, summary=summary)

        try:
            outcome = await self._deps.tailored_cv_repository.upsert(outcome)
        except Exception:
            # The row still points at the previous document
            await self._discard(stored.url, log)
            raise
        outcome.job_title = job.title

        if previous_url and previous_url != stored.url:
            await self._discard(previous_url, log)

        log.info(
            "Tailored CV generated",
            tailored_cv_id=str(outcome.id),
            regenerated=existing is not None,
            forced=force,
            summary_succeeded=summary.succeeded,
            document_size=stored.size,
            duration_ms=int((time.monotonic() - started) * 1000),
        )
        return TailoringResult(tailored_cv=outcome, reused=False)

    async def _load_job(self, job_id: JobId) -> Job:
        job = await self._deps.job_repository.get_by_id(job_id)
        if job is None:
            raise JobNotFoundError()
        return job

    async def _load_base_cv(self, cv_id: CVId, user_id: UserId) -> CVDocument:
        base_cv = await self._deps.cv_repository.get_for_user(cv_id, user_id)
        if base_cv is None:
            raise BaseDocumentNotFoundError()
        return base_cv

    async def _fetch_base_bytes(self, base_cv: CVDocument, log: Any) -> bytes:
        try:
            return await self._deps.document_store.fetch(base_cv.file_url)
        except (DocumentNotFoundError, DocumentUnreachableError) as exc:
            log.warning("Base CV file is inaccessible", error=exc.message)
            raise BaseDocumentInaccessibleError() from exc

    async def _summarize(self, job: Job, base_bytes: bytes, log: Any) -> Summary:
        extracted = await asyncio.to_thread(
            self._deps.text_extractor.extract,
            base_bytes,
            max_chars=self._deps.config.source_text_budget,
        )
        if extracted.is_empty:
            log.warning("No text extracted from base CV, summarizing without it")

        return await self._deps.summary_generator.generate(
            job.title,
            job.description_text,
            extracted.text,
        )

    async def _compose(self, base_bytes: bytes, job_title: str, summary: Summary, log: Any) -> bytes:
        try:
            return await asyncio.to_thread(
                self._deps.document_composer.compose,
                base_bytes,
                job_title,
                summary.text,
            )
        except DocumentCompositionError as exc:
            log.error("Failed to compose tailored CV", error=exc.message)
            raise

    async def _discard(self, reference: str, log: Any) -> None:
        try:
            await self._deps.document_store.delete(reference)
        except DomainException as exc:
            log.warning("Failed to delete stale tailored CV document", reference=reference, error=exc.message)

    async def list_for_user(self, user_id: UserId) -> List[TailoredCV]:
        """Return the caller's outcomes newest first, with job titles."""
        return await self._deps.tailored_cv_repository.list_by_user(user_id)

    async def get_document(self, tailored_cv_id: Any, user_id: UserId) -> Tuple[TailoredCV, bytes]:
        """Load an owned outcome together with its generated document.

        Raises:
            TailoredCVNotFoundError: missing, foreign, or its file is gone
            ConflictError: the outcome has no generated document
            DependencyUnavailableError: the document store could not be read
        """
        outcome_id = _parse_id(TailoredCVId, tailored_cv_id, TailoredCVNotFoundError)
        outcome = await self._deps.tailored_cv_repository.get_for_user(outcome_id, user_id)
        if outcome is None:
            raise TailoredCVNotFoundError()
        if not outcome.has_document:
            raise ConflictError("Tailored CV has no generated document")

        try:
            content = await self._deps.document_store.fetch(outcome.file_url)
        except DocumentNotFoundError as exc:
            self._logger.warning(
                "Tailored CV file missing from store",
                tailored_cv_id=str(outcome.id),
            )
            raise TailoredCVNotFoundError("Tailored CV file not found") from exc
        except DocumentUnreachableError as exc:
            raise DependencyUnavailableError("Document storage unavailable") from exc

        return outcome, content


__all__ = [
    "TailoredCVApplicationService",
    "TailoringRequest",
    "TailoringResult",
    "tailored_public_id",
]
