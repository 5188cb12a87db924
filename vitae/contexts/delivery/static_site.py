"""
Static site build.

Writes a self-contained copy of the resume site that can be published to any static
host (e.g. GitHub Pages):

    dist/
    ├── index.html
    ├── .nojekyll
    ├── CNAME              (only with a custom domain)
    └── static/
        ├── ...            (copied from the static directory)
        └── resume.pdf     (unless PDF generation is disabled)
"""

import shutil
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from vitae.contexts.delivery.exceptions import StaticBuildError
from vitae.contexts.delivery.logger import log_build_result, log_build_start
from vitae.contexts.rendering import write_resume_pdf
from vitae.contexts.templating import STATIC_PDF_HREF, HTMLRenderer, ResumeData
from vitae.utils.settings import DIST_PATH, STATIC_PATH

PDF_NAME = "resume.pdf"


@dataclass
class BuildResult:
    """
    Result of a static site build.

    Attributes:
        dist_dir: Output directory
        index_path: Path of the written index.html
        pdf_path: Path of the written PDF (None if skipped)
        page_count: Page count of the PDF (None if skipped or unreadable)
        written_files: Every file written or copied, in order
    """

    dist_dir: Path
    index_path: Path
    pdf_path: Optional[Path] = None
    page_count: Optional[int] = None
    written_files: List[Path] = field(default_factory=list)


def build_static_site(
    resume: ResumeData,
    static_dir: Path = STATIC_PATH,
    dist_dir: Path = DIST_PATH,
    include_pdf: bool = True,
    cname: Optional[str] = None,
    html_renderer: Optional[HTMLRenderer] = None,
) -> BuildResult:
    """
    Build the static site.

    Existing files in dist_dir are overwritten; unrelated files are left alone.

    Args:
        resume: Resume record
        static_dir: Directory of static assets to copy (must exist)
        dist_dir: Output directory (created if missing)
        include_pdf: Render static/resume.pdf alongside the page
        cname: Custom domain to write into CNAME (skipped when None or empty)
        html_renderer: Renderer for the page (defaults to the packaged template)

    Returns:
        BuildResult describing the output

    Raises:
        StaticBuildError: If the static directory is missing
        TemplateRenderError: If the page fails to render
        PDFGenerationError: If the PDF fails to render
    """
    start = time.time()
    log_build_start(dist_dir)

    if not static_dir.is_dir():
        raise StaticBuildError("Static directory not found", path=static_dir)

    dist_dir.mkdir(parents=True, exist_ok=True)
    renderer = html_renderer or HTMLRenderer()

    index_path = dist_dir / "index.html"
    index_path.write_text(renderer.render(resume, pdf_href=STATIC_PDF_HREF), encoding="utf-8")
    result = BuildResult(dist_dir=dist_dir, index_path=index_path, written_files=[index_path])

    dist_static = dist_dir / "static"
    shutil.copytree(static_dir, dist_static, dirs_exist_ok=True)
    result.written_files.extend(sorted(p for p in dist_static.rglob("*") if p.is_file()))

    if include_pdf:
        pdf_result = write_resume_pdf(resume, dist_static / PDF_NAME)
        result.pdf_path = pdf_result.pdf_path
        result.page_count = pdf_result.page_count
        if pdf_result.pdf_path not in result.written_files:
            result.written_files.append(pdf_result.pdf_path)

    # Disable Jekyll processing on GitHub Pages
    nojekyll = dist_dir / ".nojekyll"
    nojekyll.write_bytes(b"")
    result.written_files.append(nojekyll)

    if cname:
        cname_path = dist_dir / "CNAME"
        cname_path.write_text(cname.strip() + "\n", encoding="utf-8")
        result.written_files.append(cname_path)

    log_build_result(result, time.time() - start)
    return result
