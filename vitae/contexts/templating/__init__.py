"""
Templating Context

Responsibilities:
- Loads the YAML resume configuration into the immutable ResumeData record
- Defines the resume data model shared by every other context
- Renders the resume record into HTML through Jinja2 templates

Owns: Resume data model, YAML -> record conversion, HTML templates
Never: Produces PDF output or serves requests
"""

from vitae.contexts.templating.exceptions import ParseError, TemplateRenderError
from vitae.contexts.templating.html_renderer import (
    SERVER_PDF_HREF,
    STATIC_PDF_HREF,
    HTMLRenderer,
    render_html,
)
from vitae.contexts.templating.loader import load_resume, parse_resume_dict
from vitae.contexts.templating.resume_data_structure import (
    Education,
    Experience,
    Language,
    LinkedItem,
    Personal,
    Project,
    ResumeData,
    SkillCategory,
)

__all__ = [
    # Loading
    "load_resume",
    "parse_resume_dict",
    "ParseError",
    # HTML rendering
    "HTMLRenderer",
    "render_html",
    "TemplateRenderError",
    "SERVER_PDF_HREF",
    "STATIC_PDF_HREF",
    # Data structure classes
    "ResumeData",
    "Personal",
    "SkillCategory",
    "LinkedItem",
    "Experience",
    "Education",
    "Project",
    "Language",
]
