"""
Delivery Context

Responsibilities:
- Serves the resume page, static assets and PDF exports over HTTP
- Builds a static copy of the site for publishing

Owns: HTTP routes, static site output
Never: Changes how the resume is laid out or rendered
"""

from vitae.contexts.delivery.exceptions import StaticBuildError
from vitae.contexts.delivery.server import create_app, pdf_filename, run_server
from vitae.contexts.delivery.static_site import BuildResult, build_static_site

__all__ = [
    "create_app",
    "run_server",
    "pdf_filename",
    "build_static_site",
    "BuildResult",
    "StaticBuildError",
]
