"""
Integration tests for HTML rendering with the packaged Jinja2 template.
"""

import pytest

from vitae.contexts.templating import (
    SERVER_PDF_HREF,
    STATIC_PDF_HREF,
    HTMLRenderer,
    TemplateRenderError,
    parse_resume_dict,
    render_html,
)


@pytest.mark.integration
def test_render_full_resume(full_resume):
    html = render_html(full_resume)

    assert html.lstrip().startswith("<!DOCTYPE html>")
    assert "<h1 class=\"name\">Alex Morgan</h1>" in html
    for section in ["summary", "contact", "experience", "education", "skills", "projects", "languages"]:
        assert f'id="{section}"' in html
    assert 'href="mailto:alex.morgan@example.com"' in html
    assert 'href="https://www.python.org"' in html
    assert "Full-time" in html
    assert "Mar 2021 - Present" in html


@pytest.mark.integration
def test_pdf_link_target(full_resume):
    """Test the download link points at the server route or the static file."""
    assert f'href="{SERVER_PDF_HREF}"' in render_html(full_resume)
    assert f'href="{STATIC_PDF_HREF}"' in render_html(full_resume, pdf_href=STATIC_PDF_HREF)


@pytest.mark.integration
def test_empty_education_absent_from_html(no_education_resume):
    html = render_html(no_education_resume)

    assert 'id="experience"' in html
    assert 'id="education"' not in html
    assert 'id="projects"' not in html


@pytest.mark.integration
def test_render_minimal_resume(minimal_resume):
    html = render_html(minimal_resume)

    assert "Sam Lee" in html
    assert 'id="contact"' not in html
    assert "<section" not in html


@pytest.mark.integration
def test_profile_links_are_completed():
    """Test bare handles become profile URLs."""
    resume = parse_resume_dict({"personal": {"linkedin": "kim-lee", "github": "kimlee"}})
    html = render_html(resume)

    assert 'href="https://www.linkedin.com/in/kim-lee"' in html
    assert 'href="https://github.com/kimlee"' in html


@pytest.mark.integration
def test_html_is_escaped():
    resume = parse_resume_dict({"personal": {"name": "<script>alert(1)</script>"}})
    html = render_html(resume)

    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;" in html


@pytest.mark.integration
def test_template_error_is_wrapped(tmp_path, full_resume):
    """Test Jinja2 failures surface as TemplateRenderError."""
    (tmp_path / "broken.html.jinja").write_text("{{ resume.no_such_field }}")
    renderer = HTMLRenderer(template_path=tmp_path, template_name="broken.html.jinja")

    with pytest.raises(TemplateRenderError) as exc_info:
        renderer.render(full_resume)
    assert exc_info.value.template_name == "broken.html.jinja"
    assert exc_info.value.original_error is not None


@pytest.mark.integration
def test_missing_template_is_wrapped(tmp_path, full_resume):
    renderer = HTMLRenderer(template_path=tmp_path, template_name="missing.html.jinja")

    with pytest.raises(TemplateRenderError):
        renderer.render(full_resume)


@pytest.mark.integration
def test_blank_description_has_no_list():
    """Test an entry whose description lines are all blank renders no bullet list."""
    resume = parse_resume_dict(
        {"experience": [{"company": "Acme", "position": "Dev", "description": ["", "   "]}]}
    )
    html = render_html(resume)

    assert "Acme" in html
    assert "<ul" not in html.split('id="experience"', 1)[1]


@pytest.mark.integration
def test_description_lines_trimmed_and_blank_dropped():
    resume = parse_resume_dict(
        {"experience": [{"company": "Acme", "description": ["  Shipped it  ", " ", "Fixed it"]}]}
    )
    html = render_html(resume)

    assert '<li class="theme-optimized-item">Shipped it</li>' in html
    assert '<li class="theme-optimized-item">Fixed it</li>' in html
    assert html.count('<li class="theme-optimized-item">') == 2
