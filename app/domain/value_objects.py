"""Domain value objects used across aggregates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from uuid import UUID


FALLBACK_SUMMARY = "Professional summary not generated."


def _coerce_uuid(value: Any, *, field_name: str) -> UUID:
    """Convert strings or other identifiers to UUID instances while validating type."""
    if isinstance(value, UUID):
        return value
    if isinstance(getattr(value, "value", None), UUID):
        return value.value
    if isinstance(value, str):
        return UUID(value)
    raise TypeError(f"{field_name} must be a UUID-compatible value")


@dataclass(frozen=True)
class UserId:
    """Aggregate identifier for User domain entities."""

    value: UUID

    def __init__(self, value: Any):
        object.__setattr__(self, "value", _coerce_uuid(value, field_name="user_id"))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class JobId:
    """Aggregate identifier for Job domain entities."""

    value: UUID

    def __init__(self, value: Any):
        object.__setattr__(self, "value", _coerce_uuid(value, field_name="job_id"))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class CVId:
    """Aggregate identifier for uploaded base CV documents."""

    value: UUID

    def __init__(self, value: Any):
        object.__setattr__(self, "value", _coerce_uuid(value, field_name="cv_id"))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class TailoredCVId:
    """Aggregate identifier for tailoring outcomes."""

    value: UUID

    def __init__(self, value: Any):
        object.__setattr__(self, "value", _coerce_uuid(value, field_name="tailored_cv_id"))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class CandidateId:
    """Aggregate identifier for Candidate domain entities."""

    value: UUID

    def __init__(self, value: Any):
        object.__setattr__(self, "value", _coerce_uuid(value, field_name="candidate_id"))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ApplicationId:
    """Aggregate identifier for job applications."""

    value: UUID

    def __init__(self, value: Any):
        object.__setattr__(self, "value", _coerce_uuid(value, field_name="application_id"))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class EmailAddress:
    """Validated, lower-cased email address."""

    value: str

    def __init__(self, value: str):
        if not isinstance(value, str):
            raise TypeError("email must be a string")
        normalized = value.strip().lower()
        if "@" not in normalized or normalized.startswith("@") or normalized.endswith("@"):
            raise ValueError(f"Invalid email address: {value!r}")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ExtractedText:
    """Plain text pulled from a document, with a soft-failure flag."""

    text: str
    succeeded: bool

    @classmethod
    def empty(cls) -> "ExtractedText":
        return cls(text="", succeeded=False)

    @property
    def is_empty(self) -> bool:
        return not self.text


@dataclass(frozen=True)
class Summary:
    """Outcome of the summary step: the text to render and whether it was generated."""

    text: str
    succeeded: bool

    @classmethod
    def fallback(cls) -> "Summary":
        return cls(text=FALLBACK_SUMMARY, succeeded=False)


@dataclass(frozen=True)
class StoredDocument:
    """Reference returned by the document store after a successful write."""

    url: str
    public_id: str
    size: int
