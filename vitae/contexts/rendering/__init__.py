"""
Rendering Context

Responsibilities:
- Lays out the resume record as rows of styled text runs (layout engine)
- Flows the rows onto pages and produces PDF bytes (reportlab backend)
- Writes PDFs to disk and reports on them

Owns: PDF layout, styling policy, PDF generation
Never: Reads configuration files or modifies the resume record
"""

from vitae.contexts.rendering.exceptions import PDFGenerationError
from vitae.contexts.rendering.generator import PdfResult, generate_resume_pdf, write_resume_pdf
from vitae.contexts.rendering.layout import (
    Column,
    ResumeLayoutBuilder,
    Row,
    Rule,
    TextRun,
    build_layout,
    layout_texts,
)
from vitae.contexts.rendering.pdf_backend import PDFRenderer, render_pdf

__all__ = [
    # Orchestration
    "generate_resume_pdf",
    "write_resume_pdf",
    "PdfResult",
    "PDFGenerationError",
    # Layout engine
    "build_layout",
    "layout_texts",
    "ResumeLayoutBuilder",
    "Row",
    "Column",
    "TextRun",
    "Rule",
    # Backend
    "PDFRenderer",
    "render_pdf",
]
