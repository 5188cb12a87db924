"""
Integration tests for the static site build.
"""

import pytest

from vitae.contexts.delivery import StaticBuildError, build_static_site
from vitae.utils.pdf_processing import contains_text


@pytest.mark.integration
def test_build_full_site(full_resume, static_dir, tmp_path):
    dist = tmp_path / "dist"
    result = build_static_site(full_resume, static_dir=static_dir, dist_dir=dist)

    assert result.dist_dir == dist
    assert (dist / "index.html").is_file()
    assert (dist / "static" / "css" / "style.css").read_text() == "body { color: black; }\n"
    assert (dist / "static" / "js" / "main.js").is_file()
    assert (dist / ".nojekyll").read_bytes() == b""
    assert not (dist / "CNAME").exists()

    pdf_path = dist / "static" / "resume.pdf"
    assert result.pdf_path == pdf_path
    assert pdf_path.read_bytes().startswith(b"%PDF")
    assert result.page_count >= 1
    assert contains_text(pdf_path, "Northwind Payments")

    html = (dist / "index.html").read_text()
    assert "Alex Morgan" in html
    assert 'href="static/resume.pdf"' in html
    assert 'href="static/css/style.css"' in html

    assert set(result.written_files) == {p for p in dist.rglob("*") if p.is_file()}


@pytest.mark.integration
def test_build_without_pdf(full_resume, static_dir, tmp_path):
    dist = tmp_path / "dist"
    result = build_static_site(full_resume, static_dir=static_dir, dist_dir=dist, include_pdf=False)

    assert result.pdf_path is None
    assert result.page_count is None
    assert not (dist / "static" / "resume.pdf").exists()
    assert (dist / "index.html").is_file()


@pytest.mark.integration
def test_build_with_cname(minimal_resume, static_dir, tmp_path):
    dist = tmp_path / "dist"
    build_static_site(
        minimal_resume,
        static_dir=static_dir,
        dist_dir=dist,
        include_pdf=False,
        cname="  cv.example.com ",
    )

    assert (dist / "CNAME").read_text() == "cv.example.com\n"


@pytest.mark.integration
def test_build_omits_empty_sections(no_education_resume, static_dir, tmp_path):
    dist = tmp_path / "dist"
    result = build_static_site(no_education_resume, static_dir=static_dir, dist_dir=dist)

    assert 'id="education"' not in (dist / "index.html").read_text()
    assert not contains_text(result.pdf_path, "Education")


@pytest.mark.integration
def test_rebuild_overwrites(full_resume, minimal_resume, static_dir, tmp_path):
    """Test a second build replaces generated files and keeps unrelated ones."""
    dist = tmp_path / "dist"
    build_static_site(full_resume, static_dir=static_dir, dist_dir=dist, include_pdf=False)
    (dist / "keep.txt").write_text("mine")

    build_static_site(minimal_resume, static_dir=static_dir, dist_dir=dist, include_pdf=False)

    html = (dist / "index.html").read_text()
    assert "Sam Lee" in html
    assert "Alex Morgan" not in html
    assert (dist / "keep.txt").read_text() == "mine"


@pytest.mark.integration
def test_missing_static_dir(full_resume, tmp_path):
    dist = tmp_path / "dist"

    with pytest.raises(StaticBuildError) as exc_info:
        build_static_site(full_resume, static_dir=tmp_path / "nowhere", dist_dir=dist)

    assert exc_info.value.path == tmp_path / "nowhere"
    assert not dist.exists()
