"""
Integration tests for PDF generation - lays out resumes and renders them with reportlab.
Generated PDFs are inspected with pdfplumber.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from vitae.contexts.rendering import (
    Column,
    PDFGenerationError,
    Row,
    TextRun,
    generate_resume_pdf,
    render_pdf,
    write_resume_pdf,
)
from vitae.contexts.rendering.pdf_backend import to_markup
from vitae.contexts.templating import parse_resume_dict
from vitae.utils.pdf_processing import contains_text, extract_text, page_count


@pytest.mark.integration
def test_generate_full_resume(full_resume):
    """Test a complete resume renders with all its sections."""
    pdf = generate_resume_pdf(full_resume)

    assert pdf.startswith(b"%PDF")
    assert page_count(pdf) >= 1
    for expected in [
        "Alex Morgan",
        "Senior Backend Engineer",
        "Contact Information",
        "alex.morgan@example.com",
        "Experience",
        "Northwind Payments",
        "Education",
        "University of Porto",
        "Skills",
        "Kubernetes",
        "Languages",
        "Projects",
        "tinyqueue",
    ]:
        assert contains_text(pdf, expected), f"Missing from PDF: {expected}"


@pytest.mark.integration
def test_generate_minimal_resume(minimal_resume):
    """Test a resume with every list empty still renders."""
    pdf = generate_resume_pdf(minimal_resume)

    assert pdf.startswith(b"%PDF")
    assert page_count(pdf) == 1
    assert contains_text(pdf, "Sam Lee")
    assert not contains_text(pdf, "Experience")


@pytest.mark.integration
def test_empty_education_absent_from_pdf(no_education_resume):
    pdf = generate_resume_pdf(no_education_resume)

    assert contains_text(pdf, "Experience")
    assert not contains_text(pdf, "Education")


@pytest.mark.integration
def test_special_characters_are_escaped():
    """Test markup characters in resume text do not break the backend."""
    resume = parse_resume_dict(
        {
            "personal": {"name": "Pat <Lee> & Co"},
            "experience": [{"company": "R&D Labs", "position": "Lead <Dev>"}],
        }
    )
    pdf = generate_resume_pdf(resume)
    text = extract_text(pdf)

    assert "R&D Labs" in text
    assert "Lead <Dev>" in text


@pytest.mark.integration
def test_long_resume_paginates():
    """Test content longer than a page flows onto more pages."""
    resume = parse_resume_dict(
        {
            "personal": {"name": "Verbose Person"},
            "experience": [
                {
                    "company": f"Company {i}",
                    "position": "Engineer",
                    "description": [f"Did thing {j} " * 12 for j in range(6)],
                }
                for i in range(12)
            ],
        }
    )
    assert page_count(generate_resume_pdf(resume)) > 1


@pytest.mark.integration
@pytest.mark.parametrize(
    "data",
    [
        {"projects": [{"name": "Essay", "description": " ".join(["word"] * 3000)}]},
        {"experience": [{"company": "Acme", "description": [" ".join(["word"] * 3000)]}]},
        {"personal": {"name": "Long Summary", "summary": " ".join(["word"] * 3000)}},
    ],
    ids=["project_description", "experience_bullet", "summary"],
)
def test_text_block_longer_than_a_page(data):
    """Test a single text block taller than a page breaks across pages."""
    pdf = generate_resume_pdf(parse_resume_dict(data))

    assert pdf.startswith(b"%PDF")
    assert page_count(pdf) > 1
    assert extract_text(pdf).count("word") == 3000


@pytest.mark.integration
def test_concurrent_generation_shares_nothing(full_resume):
    """Test parallel exports of the same record all succeed."""
    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(generate_resume_pdf, [full_resume] * 4))

    counts = {page_count(pdf) for pdf in results}
    assert all(pdf.startswith(b"%PDF") for pdf in results)
    assert len(counts) == 1


@pytest.mark.integration
def test_backend_failure_raises_generation_error():
    """Test a grid row taller than a page aborts generation."""
    too_tall = Row(400, [Column(6, [TextRun("does not")]), Column(6, [TextRun("fit")])])

    with pytest.raises(PDFGenerationError) as exc_info:
        render_pdf([too_tall])
    assert exc_info.value.original_error is not None


@pytest.mark.integration
def test_write_resume_pdf(full_resume, tmp_path):
    output = tmp_path / "out" / "resume.pdf"
    result = write_resume_pdf(full_resume, output)

    assert output.exists()
    assert result.pdf_path == output
    assert result.num_bytes == output.stat().st_size
    assert result.page_count >= 1


@pytest.mark.unit
def test_to_markup():
    """Test escaping, preserved spacing and line breaks."""
    assert to_markup("R&D <team>") == "R&amp;D &lt;team&gt;"
    assert to_markup("• a   • b") == "• a&nbsp;&nbsp;&nbsp;• b"
    assert to_markup("• first\n  second") == "• first<br/>&nbsp;&nbsp;second"
