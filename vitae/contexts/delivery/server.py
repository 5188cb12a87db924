"""
HTTP delivery.

Serves the rendered resume page, its static assets, and PDF exports.

Routes:
    GET /            rendered HTML page
    GET /static/...  files from the static directory
    GET /export-pdf  freshly generated PDF as an attachment

Every response carries an X-Request-ID header; log records made while handling the
request are tagged with the same id.
"""

import time
import uuid
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response
from fastapi.staticfiles import StaticFiles

from vitae import __version__
from vitae.contexts.delivery.logger import (
    _log_debug,
    _log_warning,
    log_request,
    log_request_failure,
    log_server_start,
    request_context,
)
from vitae.contexts.rendering import PDFGenerationError, generate_resume_pdf
from vitae.contexts.templating import (
    SERVER_PDF_HREF,
    HTMLRenderer,
    ResumeData,
    TemplateRenderError,
)
from vitae.utils.settings import STATIC_PATH, resolve_port

PdfGenerator = Callable[[ResumeData], bytes]


def pdf_filename(moment: Optional[datetime] = None) -> str:
    """Timestamped download name, e.g. resume_20250314_093000.pdf."""
    moment = moment or datetime.now()
    return f"resume_{moment:%Y%m%d_%H%M%S}.pdf"


def create_app(
    resume: ResumeData,
    static_dir: Path = STATIC_PATH,
    html_renderer: Optional[HTMLRenderer] = None,
    pdf_generator: PdfGenerator = generate_resume_pdf,
) -> FastAPI:
    """
    Build the FastAPI application for a loaded resume.

    The resume is shared read-only by every request. Each PDF export produces its own
    layout and buffer.

    Args:
        resume: Resume record loaded at startup
        static_dir: Directory served under /static (skipped with a warning if missing)
        html_renderer: Renderer for the page (defaults to the packaged template)
        pdf_generator: Callable producing PDF bytes from the resume

    Returns:
        Configured FastAPI application
    """
    renderer = html_renderer or HTMLRenderer()

    app = FastAPI(
        title="vitae",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    @app.middleware("http")
    async def tag_request(request: Request, call_next):
        request_id = uuid.uuid4().hex[:8]
        start = time.time()
        with request_context(request_id):
            response = await call_next(request)
            log_request(request.method, request.url.path, response.status_code, time.time() - start)
        response.headers["X-Request-ID"] = request_id
        return response

    @app.get("/", response_class=HTMLResponse)
    def index():
        try:
            html = renderer.render(resume, pdf_href=SERVER_PDF_HREF)
        except TemplateRenderError as e:
            log_request_failure("GET /", e)
            return PlainTextResponse(str(e), status_code=500)
        return HTMLResponse(html)

    @app.get("/export-pdf")
    def export_pdf():
        try:
            pdf_bytes = pdf_generator(resume)
        except PDFGenerationError as e:
            log_request_failure("GET /export-pdf", e)
            return PlainTextResponse(f"Failed to generate PDF: {e}", status_code=500)

        return Response(
            content=pdf_bytes,
            media_type="application/pdf",
            headers={"Content-Disposition": f"attachment; filename={pdf_filename()}"},
        )

    if static_dir.is_dir():
        app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")
        _log_debug(f"Serving static files from {static_dir}")
    else:
        _log_warning(f"Static directory not found, /static will not be served: {static_dir}")

    return app


def run_server(
    resume: ResumeData,
    static_dir: Path = STATIC_PATH,
    port: Optional[int] = None,
    host: str = "0.0.0.0",
) -> None:
    """
    Serve the resume until interrupted.

    Args:
        resume: Resume record loaded at startup
        static_dir: Directory served under /static
        port: Port to bind (defaults to the PORT environment variable, then 8081)
        host: Interface to bind
    """
    port = port or resolve_port()
    app = create_app(resume, static_dir=static_dir)

    log_server_start(port, static_dir)
    uvicorn.run(app, host=host, port=port, log_level="info")
