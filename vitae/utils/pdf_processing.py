"""
PDF inspection utilities.

Used to report on generated PDFs (page counts) and to check rendered content in tests.
"""

import io
from pathlib import Path
from typing import List, Optional, Union

import pdfplumber

PdfSource = Union[Path, bytes]


def _open(source: PdfSource):
    if isinstance(source, (bytes, bytearray)):
        return pdfplumber.open(io.BytesIO(source))
    return pdfplumber.open(str(source))


def page_count(source: PdfSource) -> Optional[int]:
    """Get page count from a PDF file or byte string, or None if unreadable."""
    try:
        with _open(source) as pdf:
            return len(pdf.pages)
    except Exception:
        return None


def extract_page_texts(source: PdfSource) -> List[str]:
    """
    Extract plain text from each page of a PDF.

    Args:
        source: Path to a PDF file, or the PDF bytes

    Returns:
        One string per page (empty string for pages without text)
    """
    with _open(source) as pdf:
        return [page.extract_text() or "" for page in pdf.pages]


def extract_text(source: PdfSource) -> str:
    """Extract plain text from all pages of a PDF, pages separated by newlines."""
    return "\n".join(extract_page_texts(source))


def normalize_for_matching(text: str) -> str:
    """Keep only lowercase alphanumeric characters for fuzzy text matching."""
    return "".join(c for c in text.lower() if c.isalnum())


def contains_text(source: PdfSource, needle: str) -> bool:
    """Check whether a PDF contains text, ignoring case, whitespace, and punctuation."""
    return normalize_for_matching(needle) in normalize_for_matching(extract_text(source))
