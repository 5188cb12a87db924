"""
PDF generation orchestration.

Composes the layout engine and the PDF backend, with logging and file output.
"""

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from vitae.contexts.rendering.exceptions import PDFGenerationError
from vitae.contexts.rendering.layout import build_layout
from vitae.contexts.rendering.logger import _log_debug, log_pdf_failure, log_pdf_result, log_pdf_start
from vitae.contexts.rendering.pdf_backend import render_pdf
from vitae.contexts.templating.resume_data_structure import ResumeData
from vitae.utils.pdf_processing import page_count


@dataclass
class PdfResult:
    """
    Result of writing a resume PDF to disk.

    Attributes:
        pdf_path: Path of the written PDF
        num_bytes: Size of the PDF
        page_count: Number of pages (None if the PDF could not be inspected)
        elapsed_time: Seconds spent generating and writing
    """

    pdf_path: Path
    num_bytes: int
    page_count: Optional[int] = None
    elapsed_time: float = 0.0


def generate_resume_pdf(resume: ResumeData) -> bytes:
    """
    Lay out and render a resume as PDF bytes.

    Every call builds its own layout and output buffer, so concurrent calls share
    nothing but the read-only resume.

    Args:
        resume: Resume record

    Returns:
        PDF document bytes

    Raises:
        PDFGenerationError: If the layout or the backend fails
    """
    name = resume.personal.name
    start = time.time()

    try:
        rows = build_layout(resume)
        log_pdf_start(name, len(rows))
        pdf_bytes = render_pdf(rows, title=f"{name} - Resume" if name else "Resume", author=name)
    except PDFGenerationError as e:
        log_pdf_failure(name, e, time.time() - start)
        raise
    except ValueError as e:
        log_pdf_failure(name, e, time.time() - start)
        raise PDFGenerationError("Failed to lay out PDF", original_error=e) from e

    log_pdf_result(name, len(pdf_bytes), time.time() - start)
    return pdf_bytes


def write_resume_pdf(resume: ResumeData, output_path: Path) -> PdfResult:
    """
    Generate a resume PDF and write it to a file, creating parent directories.

    Args:
        resume: Resume record
        output_path: Destination file

    Returns:
        PdfResult describing the written file

    Raises:
        PDFGenerationError: If generation fails (no file is written)
    """
    start = time.time()
    pdf_bytes = generate_resume_pdf(resume)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(pdf_bytes)
    _log_debug(f"  PDF: {output_path}")

    return PdfResult(
        pdf_path=output_path,
        num_bytes=len(pdf_bytes),
        page_count=page_count(pdf_bytes),
        elapsed_time=time.time() - start,
    )
