"""Tests for identifier and value object coercion."""

from uuid import UUID, uuid4

import pytest

from app.domain.entities.cv_document import PDF_MIME_TYPE, CVDocument
from app.domain.entities.job_application import ApplicationStatus
from app.domain.exceptions import ValidationError
from app.domain.value_objects import (
    FALLBACK_SUMMARY,
    CVId,
    EmailAddress,
    ExtractedText,
    JobId,
    Summary,
    UserId,
)


class TestIdentifiers:
    def test_accepts_uuid_and_string(self):
        raw = uuid4()
        assert JobId(raw) == JobId(str(raw))
        assert isinstance(JobId(str(raw)).value, UUID)

    def test_malformed_string_is_value_error(self):
        with pytest.raises(ValueError):
            CVId("abc")

    def test_accepts_existing_identifier(self):
        user_id = UserId(uuid4())
        assert UserId(user_id) == user_id
        assert CVId(JobId(user_id.value)).value == user_id.value

    def test_non_string_is_type_error(self):
        with pytest.raises(TypeError):
            UserId(42)

    def test_str_is_canonical(self):
        raw = uuid4()
        assert str(CVId(raw)) == str(raw)


class TestEmailAddress:
    def test_normalizes(self):
        assert EmailAddress("  Jane@Example.COM ").value == "jane@example.com"

    @pytest.mark.parametrize("value", ["plain", "@example.com", "jane@"])
    def test_rejects_malformed(self, value):
        with pytest.raises(ValueError):
            EmailAddress(value)


class TestSummaryAndText:
    def test_fallback(self):
        summary = Summary.fallback()
        assert summary.text == FALLBACK_SUMMARY == "Professional summary not generated."
        assert summary.succeeded is False

    def test_empty_extraction(self):
        assert ExtractedText.empty().is_empty
        assert not ExtractedText("text", True).is_empty


class TestApplicationStatus:
    def test_parse_is_case_insensitive(self):
        assert ApplicationStatus.parse(" Hired ") is ApplicationStatus.HIRED

    @pytest.mark.parametrize("value", [None, "", "promoted"])
    def test_parse_rejects_unknown(self, value):
        with pytest.raises(ValidationError):
            ApplicationStatus.parse(value)


class TestCVDocument:
    def test_pdf_download_name_gets_suffix(self):
        cv = CVDocument.create(UserId(uuid4()), "resume", PDF_MIME_TYPE, "local://cvs/x.pdf")
        assert cv.download_filename() == "resume.pdf"

    def test_other_download_name_unchanged(self):
        cv = CVDocument.create(UserId(uuid4()), "resume.docx", "application/msword", "local://cvs/x.doc")
        assert cv.download_filename() == "resume.docx"
