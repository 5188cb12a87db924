"""
Integration tests for the HTTP routes, driven through FastAPI's TestClient.
"""

import re
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from vitae.contexts.delivery import create_app, pdf_filename
from vitae.contexts.rendering import PDFGenerationError
from vitae.contexts.templating import HTMLRenderer


def failing_generator(resume):
    raise PDFGenerationError("Layout failed", original_error=RuntimeError("boom"))


@pytest.fixture
def client(full_resume, static_dir):
    return TestClient(create_app(full_resume, static_dir=static_dir))


@pytest.mark.integration
def test_index_page(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "Alex Morgan" in response.text
    assert 'href="/export-pdf"' in response.text


@pytest.mark.integration
def test_export_pdf(client):
    """Test the export route returns a PDF attachment with a timestamped name."""
    response = client.get("/export-pdf")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    disposition = response.headers["content-disposition"]
    assert re.fullmatch(r"attachment; filename=resume_\d{8}_\d{6}\.pdf", disposition)
    assert response.content.startswith(b"%PDF")


@pytest.mark.integration
def test_export_pdf_failure(full_resume, static_dir):
    """Test a failed export returns 500 and leaves the server usable."""
    client = TestClient(create_app(full_resume, static_dir=static_dir, pdf_generator=failing_generator))

    response = client.get("/export-pdf")
    assert response.status_code == 500
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text.startswith("Failed to generate PDF:")
    assert "boom" in response.text

    assert client.get("/").status_code == 200


@pytest.mark.integration
def test_index_template_failure(full_resume, static_dir, tmp_path):
    templates = tmp_path / "templates"
    templates.mkdir()
    (templates / "broken.html.jinja").write_text("{{ missing_variable }}")
    renderer = HTMLRenderer(template_path=templates, template_name="broken.html.jinja")
    client = TestClient(create_app(full_resume, static_dir=static_dir, html_renderer=renderer))

    response = client.get("/")
    assert response.status_code == 500
    assert "Failed to render resume page" in response.text


@pytest.mark.integration
def test_static_files(client):
    response = client.get("/static/css/style.css")

    assert response.status_code == 200
    assert "color: black" in response.text
    assert client.get("/static/missing.css").status_code == 404


@pytest.mark.integration
def test_missing_static_dir(full_resume, tmp_path):
    """Test the page is still served when there are no static assets."""
    client = TestClient(create_app(full_resume, static_dir=tmp_path / "nowhere"))

    assert client.get("/").status_code == 200
    assert client.get("/static/css/style.css").status_code == 404


@pytest.mark.integration
def test_request_id_header(client):
    """Test each response is tagged with its own request id."""
    first = client.get("/").headers["x-request-id"]
    second = client.get("/export-pdf").headers["x-request-id"]

    assert re.fullmatch(r"[0-9a-f]{8}", first)
    assert first != second


@pytest.mark.integration
def test_unknown_route(client):
    assert client.get("/nope").status_code == 404


@pytest.mark.unit
def test_pdf_filename():
    assert pdf_filename(datetime(2025, 3, 14, 9, 30, 0)) == "resume_20250314_093000.pdf"
    assert re.fullmatch(r"resume_\d{8}_\d{6}\.pdf", pdf_filename())
