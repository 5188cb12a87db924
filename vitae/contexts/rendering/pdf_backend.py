"""
PDF Backend

Flows layout rows onto A4 pages with reportlab platypus and returns the PDF bytes.

Rows split into grid columns become one-line Tables whose column widths follow the
12-unit grid. Full-width rows are emitted as their Paragraph and HRFlowable items
directly, so long text can break across pages. Pagination is left to reportlab.
"""

import io
import re
from typing import Dict, List, Tuple
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_LEFT, TA_RIGHT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import (
    Flowable,
    HRFlowable,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from vitae.contexts.rendering import styling as st
from vitae.contexts.rendering.exceptions import PDFGenerationError
from vitae.contexts.rendering.layout import Column, Row, Rule, TextRun

ALIGNMENTS = {"left": TA_LEFT, "center": TA_CENTER, "right": TA_RIGHT}

# Default inner padding of the SimpleDocTemplate frame, per side (points)
FRAME_PADDING = 6

CELL_STYLE = TableStyle(
    [
        ("LEFTPADDING", (0, 0), (-1, -1), 0),
        ("RIGHTPADDING", (0, 0), (-1, -1), 0),
        ("TOPPADDING", (0, 0), (-1, -1), 0),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 0),
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
    ]
)


def to_markup(text: str) -> str:
    """
    Convert plain text to reportlab paragraph markup.

    Escapes XML special characters, keeps runs of spaces, and turns newlines into
    line breaks.
    """
    markup = escape(text)
    markup = re.sub(r" {2,}", lambda m: "&nbsp;" * len(m.group()), markup)
    return markup.replace("\n", "<br/>")


class _StyleCache:
    """ParagraphStyle instances keyed by the visual attributes of a run."""

    def __init__(self):
        self._styles: Dict[Tuple, ParagraphStyle] = {}

    def get(self, run: TextRun) -> ParagraphStyle:
        key = (run.size, run.style, run.color, run.align)
        if key not in self._styles:
            self._styles[key] = ParagraphStyle(
                name=f"run{len(self._styles)}",
                fontName=st.FONT_NAMES[run.style],
                fontSize=run.size,
                leading=run.size * st.LEADING_RATIO,
                textColor=colors.HexColor(run.color),
                alignment=ALIGNMENTS[run.align],
            )
        return self._styles[key]


class PDFRenderer:
    """Renders layout rows into a PDF document held in memory."""

    def __init__(self, title: str = "", author: str = ""):
        self.title = title
        self.author = author
        self._styles = _StyleCache()

    def _cell_flowables(self, column: Column) -> List[Flowable]:
        flowables: List[Flowable] = []
        for item in column.items:
            if isinstance(item, TextRun):
                if item.top:
                    flowables.append(Spacer(1, item.top * mm))
                flowables.append(Paragraph(to_markup(item.text), self._styles.get(item)))
            elif isinstance(item, Rule):
                flowables.append(
                    HRFlowable(
                        width=f"{item.length * 100:.0f}%",
                        thickness=item.thickness,
                        color=colors.HexColor(item.color),
                        hAlign="LEFT",
                        spaceBefore=0,
                        spaceAfter=0,
                    )
                )
            else:
                raise TypeError(f"Unsupported layout item: {type(item).__name__}")
        return flowables

    def _row_flowables(self, row: Row, frame_width: float, frame_height: float) -> List[Flowable]:
        if row.is_spacer:
            return [Spacer(1, row.height * mm)]

        col_widths = [frame_width * col.span / st.GRID_COLUMNS for col in row.columns]
        cells = [self._cell_flowables(col) for col in row.columns]

        # Row height is the requested minimum unless the content needs more
        content_height = max(
            sum(f.wrap(width, frame_height)[1] for f in cell)
            for cell, width in zip(cells, col_widths)
        )
        minimum = row.height * mm

        if len(row.columns) == 1 and row.columns[0].span == st.GRID_COLUMNS:
            # Full-width rows flow directly so long paragraphs can split across pages
            flowables = list(cells[0])
            if content_height < minimum:
                flowables.append(Spacer(1, minimum - content_height))
            return flowables

        table = Table(
            [cells],
            colWidths=col_widths,
            rowHeights=[max(minimum, content_height)],
            hAlign="LEFT",
        )
        table.setStyle(CELL_STYLE)
        return [table]

    def render(self, rows: List[Row]) -> bytes:
        """
        Render rows to PDF bytes.

        Raises:
            PDFGenerationError: If reportlab fails at any point; nothing is returned
        """
        buffer = io.BytesIO()
        try:
            doc = SimpleDocTemplate(
                buffer,
                pagesize=A4,
                leftMargin=st.PAGE_MARGIN_MM * mm,
                rightMargin=st.PAGE_MARGIN_MM * mm,
                topMargin=st.PAGE_MARGIN_MM * mm,
                bottomMargin=st.PAGE_MARGIN_MM * mm,
                title=self.title,
                author=self.author,
            )
            frame_width = doc.width - 2 * FRAME_PADDING
            frame_height = doc.height - 2 * FRAME_PADDING
            story = [
                flowable
                for row in rows
                for flowable in self._row_flowables(row, frame_width, frame_height)
            ]
            doc.build(story)
        except Exception as e:
            raise PDFGenerationError("Failed to generate PDF", original_error=e) from e

        return buffer.getvalue()


def render_pdf(rows: List[Row], title: str = "", author: str = "") -> bytes:
    """Render layout rows to PDF bytes with a fresh renderer."""
    return PDFRenderer(title=title, author=author).render(rows)
