"""
Tailored CV composition.

The base CV is copied page for page and a summary section is appended on
fresh pages drawn with reportlab:

    Tailored for: {job title}
    Professional Summary
    {summary, wrapped to a fixed character width}

Layout is computed by ``layout_summary`` as plain data before anything is
drawn, so the same inputs always produce the same text at the same
positions.
"""

import io
import textwrap
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import structlog
from PyPDF2 import PdfReader, PdfWriter
from reportlab.lib.pagesizes import LETTER
from reportlab.lib.units import inch
from reportlab.pdfgen import canvas

from app.domain.exceptions import DocumentCompositionError
from app.domain.interfaces import IDocumentComposer

logger = structlog.get_logger(__name__)

TITLE_PREFIX = "Tailored for: "
SUMMARY_HEADER = "Professional Summary"

FONT_BODY = "Helvetica"
FONT_BOLD = "Helvetica-Bold"


@dataclass(frozen=True)
class LayoutStyle:
    """Typography and margins for the summary pages, in points."""

    line_width: int = 90
    left_margin: float = 0.75 * inch
    top_margin: float = 0.75 * inch
    bottom_margin: float = 0.75 * inch
    title_size: float = 14
    header_size: float = 12
    body_size: float = 10
    leading: float = 14


@dataclass(frozen=True)
class PlacedLine:
    text: str
    x: float
    y: float
    font: str
    size: float


@dataclass
class LayoutPage:
    lines: List[PlacedLine] = field(default_factory=list)


def wrap_summary(summary_text: str, line_width: int) -> List[str]:
    """Wrap each paragraph to ``line_width`` characters; blank paragraphs are kept."""
    lines: List[str] = []
    for paragraph in (summary_text or "").splitlines():
        paragraph = paragraph.strip()
        if not paragraph:
            lines.append("")
            continue
        lines.extend(
            textwrap.wrap(
                paragraph,
                width=line_width,
                break_long_words=True,
                break_on_hyphens=False,
            )
        )
    # Trailing blank lines carry no content
    while lines and not lines[-1]:
        lines.pop()
    return lines


def layout_summary(
    job_title: str,
    summary_text: str,
    page_height: float,
    style: Optional[LayoutStyle] = None,
) -> List[LayoutPage]:
    """
    Place the title, header and wrapped summary lines on one or more pages.

    A new page starts whenever the next line would fall below the bottom
    margin; layout resumes at the top margin of that page.
    """
    style = style or LayoutStyle()
    top = page_height - style.top_margin
    pages: List[LayoutPage] = [LayoutPage()]
    y = top

    def place(text: str, font: str, size: float) -> None:
        nonlocal y
        if y < style.bottom_margin:
            pages.append(LayoutPage())
            y = top
        pages[-1].lines.append(PlacedLine(text, style.left_margin, y, font, size))
        y -= style.leading

    place(f"{TITLE_PREFIX}{job_title}", FONT_BOLD, style.title_size)
    y -= style.leading / 2
    place(SUMMARY_HEADER, FONT_BOLD, style.header_size)

    for line in wrap_summary(summary_text, style.line_width):
        place(line, FONT_BODY, style.body_size)

    return pages


def _drawable(text: str) -> str:
    # Standard Type 1 fonts only cover Latin-1
    return text.encode("latin-1", "replace").decode("latin-1")


class PdfDocumentComposer(IDocumentComposer):
    """Appends a tailored summary section to a copy of a base PDF."""

    def __init__(self, style: Optional[LayoutStyle] = None):
        self.style = style or LayoutStyle()

    def compose(self, base_document: bytes, job_title: str, summary_text: str) -> bytes:
        """
        Build the tailored CV.

        Raises:
            DocumentCompositionError: the base bytes are not a readable PDF
        """
        reader = self._open_base(base_document)
        page_size = self._page_size(reader)

        pages = layout_summary(job_title, summary_text, page_size[1], self.style)
        overlay = self._render(pages, page_size)

        writer = PdfWriter()
        try:
            for page in reader.pages:
                writer.add_page(page)
            for page in PdfReader(io.BytesIO(overlay)).pages:
                writer.add_page(page)

            output = io.BytesIO()
            writer.write(output)
        except Exception as e:
            logger.error("Failed to assemble tailored CV", error=str(e), error_type=type(e).__name__)
            raise DocumentCompositionError() from e

        logger.info(
            "Tailored CV composed",
            base_pages=len(reader.pages),
            summary_pages=len(pages),
            summary_lines=sum(len(p.lines) for p in pages) - 2,
        )
        return output.getvalue()

    def _open_base(self, base_document: bytes) -> PdfReader:
        if not base_document or base_document.lstrip()[:4] != b"%PDF":
            raise DocumentCompositionError("Base CV is not a PDF document")
        try:
            reader = PdfReader(io.BytesIO(base_document))
            if reader.is_encrypted:
                reader.decrypt("")
            # Force page tree parsing so corrupt files fail here
            len(reader.pages)
        except Exception as e:
            logger.error("Base CV could not be parsed", error=str(e), error_type=type(e).__name__)
            raise DocumentCompositionError("Base CV could not be parsed") from e
        return reader

    def _page_size(self, reader: PdfReader) -> Tuple[float, float]:
        """Match the first page of the base, defaulting to US Letter."""
        try:
            if len(reader.pages) > 0:
                box = reader.pages[0].mediabox
                width, height = float(box.width), float(box.height)
                if width > 0 and height > 0:
                    return width, height
        except Exception as e:
            logger.debug("Falling back to Letter page size", error=str(e))
        return LETTER

    def _render(self, pages: List[LayoutPage], page_size: Tuple[float, float]) -> bytes:
        buffer = io.BytesIO()
        # invariant=1 pins creation dates and document IDs
        pdf = canvas.Canvas(buffer, pagesize=page_size, invariant=1)
        for page in pages:
            for line in page.lines:
                pdf.setFont(line.font, line.size)
                pdf.drawString(line.x, line.y, _drawable(line.text))
            pdf.showPage()
        pdf.save()
        return buffer.getvalue()


__all__ = [
    "PdfDocumentComposer",
    "LayoutStyle",
    "LayoutPage",
    "PlacedLine",
    "layout_summary",
    "wrap_summary",
    "TITLE_PREFIX",
    "SUMMARY_HEADER",
]
