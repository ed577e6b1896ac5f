"""Tests for summary layout and tailored CV composition."""

import io

import pytest
from PyPDF2 import PdfReader
from reportlab.lib.pagesizes import A4

from app.domain.exceptions import DocumentCompositionError
from app.infrastructure.document.document_composer import (
    SUMMARY_HEADER,
    TITLE_PREFIX,
    LayoutStyle,
    PdfDocumentComposer,
    layout_summary,
    wrap_summary,
)
from tests.fixtures.pdf_fixtures import build_a4_pdf, build_pdf, pdf_page_count, pdf_text


class TestWrapSummary:
    def test_lines_never_exceed_width(self):
        text = "word " * 200

        lines = wrap_summary(text, 90)

        assert len(lines) > 1
        assert all(len(line) <= 90 for line in lines)

    def test_breaks_overlong_words(self):
        lines = wrap_summary("x" * 200, 90)

        assert [len(line) for line in lines] == [90, 90, 20]

    def test_keeps_paragraph_breaks(self):
        assert wrap_summary("First.\n\nSecond.", 90) == ["First.", "", "Second."]

    def test_empty_summary(self):
        assert wrap_summary("", 90) == []


class TestLayoutSummary:
    def test_title_then_header_then_body(self):
        pages = layout_summary("Backend Engineer", "Short summary.", 792)

        texts = [line.text for line in pages[0].lines]
        assert texts == [f"{TITLE_PREFIX}Backend Engineer", SUMMARY_HEADER, "Short summary."]

    def test_lines_descend_within_margins(self):
        style = LayoutStyle()
        pages = layout_summary("Role", "\n".join(f"line {i}" for i in range(10)), 792, style)

        ys = [line.y for line in pages[0].lines]
        assert ys == sorted(ys, reverse=True)
        assert all(y >= style.bottom_margin for y in ys)

    def test_paginates_in_order(self):
        summary = "\n".join(f"line {i}" for i in range(150))

        pages = layout_summary("Role", summary, 792)

        assert len(pages) > 1
        body = [line.text for page in pages for line in page.lines][2:]
        assert body == [f"line {i}" for i in range(150)]
        assert pages[1].lines[0].y == pytest.approx(pages[0].lines[0].y)

    def test_same_inputs_same_layout(self):
        assert layout_summary("Role", "Text", 792) == layout_summary("Role", "Text", 792)


class TestPdfDocumentComposer:
    @pytest.fixture
    def composer(self):
        return PdfDocumentComposer()

    def test_appends_summary_after_base_pages(self, composer):
        base = build_pdf(["Base page"], pages=2)

        composed = composer.compose(base, "Backend Engineer", "Great fit for the role.")

        reader = PdfReader(io.BytesIO(composed))
        assert len(reader.pages) == 3
        assert "Base page" in reader.pages[0].extract_text()
        summary_text = reader.pages[2].extract_text()
        assert "Tailored for: Backend Engineer" in summary_text
        assert "Professional Summary" in summary_text
        assert "Great fit for the role." in summary_text

    def test_long_summary_adds_pages(self, composer):
        summary = "\n".join(f"Point {i}" for i in range(200))

        composed = composer.compose(build_pdf(), "Role", summary)

        assert pdf_page_count(composed) >= 4
        assert "Point 199" in pdf_text(composed)

    def test_summary_pages_match_base_page_size(self, composer):
        composed = composer.compose(build_a4_pdf(), "Role", "Summary")

        last_page = PdfReader(io.BytesIO(composed)).pages[-1]
        assert float(last_page.mediabox.width) == pytest.approx(A4[0])
        assert float(last_page.mediabox.height) == pytest.approx(A4[1])

    def test_non_latin_text_does_not_fail(self, composer):
        composed = composer.compose(build_pdf(), "Ingénieur ☃", "Résumé 中文")

        assert pdf_page_count(composed) == 2

    @pytest.mark.parametrize("base", [b"", b"PK\x03\x04docx bytes", b"plain text"])
    def test_unusable_base_raises(self, composer, base):
        with pytest.raises(DocumentCompositionError):
            composer.compose(base, "Role", "Summary")
