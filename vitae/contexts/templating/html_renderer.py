"""
HTML Renderer

Renders the resume record into a standalone HTML page with Jinja2.
"""

import time
from pathlib import Path
from typing import Optional

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateError,
    select_autoescape,
)

from vitae.contexts.templating.exceptions import TemplateRenderError
from vitae.contexts.templating.logger import log_html_result
from vitae.contexts.templating.resume_data_structure import ResumeData

TEMPLATE_PATH = Path(__file__).parent / "template"
RESUME_TEMPLATE = "resume.html.jinja"

# Where the download button points when served over HTTP
SERVER_PDF_HREF = "/export-pdf"
# Where the download button points in the static build (relative to index.html)
STATIC_PDF_HREF = "static/resume.pdf"


class HTMLRenderer:
    """
    Jinja2-backed renderer for the resume page.

    Templates are loaded from vitae/contexts/templating/template/ and compiled once
    per renderer. Rendering only reads the resume record, so a single renderer can be
    shared between concurrent requests.
    """

    def __init__(self, template_path: Path = TEMPLATE_PATH, template_name: str = RESUME_TEMPLATE):
        """
        Initialize the renderer.

        Args:
            template_path: Directory containing the templates
            template_name: Name of the page template within template_path
        """
        self.template_path = template_path
        self.template_name = template_name
        self._template: Optional[Template] = None

        self.env = Environment(
            loader=FileSystemLoader(str(template_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=select_autoescape(enabled_extensions=("html", "jinja"), default=True),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def get_template(self) -> Template:
        if self._template is None:
            self._template = self.env.get_template(self.template_name)
        return self._template

    def render(self, resume: ResumeData, pdf_href: str = SERVER_PDF_HREF) -> str:
        """
        Render the resume page.

        Args:
            resume: Resume record
            pdf_href: Target of the "download PDF" link

        Returns:
            HTML document as a string

        Raises:
            TemplateRenderError: If the template is missing or fails to render
        """
        start = time.time()
        try:
            html = self.get_template().render(resume=resume, pdf_href=pdf_href)
        except TemplateError as e:
            raise TemplateRenderError(
                "Failed to render resume page",
                template_name=self.template_name,
                original_error=e,
            ) from e

        log_html_result(resume.personal.name, len(html), time.time() - start)
        return html


def render_html(resume: ResumeData, pdf_href: str = SERVER_PDF_HREF) -> str:
    """Render the resume page with the default template."""
    return HTMLRenderer().render(resume, pdf_href=pdf_href)
