#!/usr/bin/env python3
"""
Resume Publishing CLI

Serves the resume over HTTP, builds the static site, and exports the PDF.

Commands:
    serve    - Serve the resume page, static files and PDF export
    build    - Build the static site into dist/
    pdf      - Write the resume PDF to a file
    validate - Load the configuration and report what it contains

Examples:\n

    publish.py serve                              # Serve on $PORT (default 8081)

    publish.py serve --port 9000                  # Serve on a specific port

    publish.py build                              # Build dist/ with resume.pdf

    publish.py build --no-pdf --cname cv.example.com

    publish.py pdf out/resume.pdf                 # Export the PDF only

    publish.py validate --config other.yaml       # Check a configuration file
"""

from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from vitae.contexts.delivery import StaticBuildError, build_static_site, run_server
from vitae.contexts.delivery.logger import setup_delivery_logger
from vitae.contexts.rendering import PDFGenerationError, write_resume_pdf
from vitae.contexts.rendering.logger import setup_rendering_logger
from vitae.contexts.templating import ParseError, TemplateRenderError, load_resume
from vitae.contexts.templating.logger import setup_templating_logger
from vitae.utils.settings import DIST_PATH, LOGS_PATH, RESUME_CONFIG_PATH, STATIC_PATH, resolve_port

app = typer.Typer(
    help="Publish a YAML resume as an HTML page, a static site, and a PDF",
    add_completion=False,
    invoke_without_command=True,
)

ConfigOption = Annotated[
    Path,
    typer.Option("--config", "-c", help="Resume YAML configuration file"),
]
StaticOption = Annotated[
    Path,
    typer.Option("--static", "-s", help="Directory of static assets"),
]


def session_log_dir(command: str) -> Path:
    """Per-run log directory, e.g. outs/logs/serve_20251114_123456."""
    return LOGS_PATH / f"{command}_{datetime.now():%Y%m%d_%H%M%S}"


def fail(message: str) -> None:
    """Print an error and exit with status 1."""
    typer.secho(f"Error: {message}\n", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def load_or_exit(config: Path):
    try:
        return load_resume(config)
    except ParseError as e:
        fail(str(e))


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("serve")
def serve_command(
    config: ConfigOption = RESUME_CONFIG_PATH,
    static: StaticOption = STATIC_PATH,
    port: Annotated[
        Optional[int],
        typer.Option("--port", "-p", help="Port to listen on (default: $PORT or 8081)", min=1, max=65535),
    ] = None,
    host: Annotated[str, typer.Option("--host", help="Interface to bind")] = "0.0.0.0",
):
    """
    Serve the resume over HTTP.

    Routes: / (HTML page), /static/... (assets), /export-pdf (PDF download).

    Examples:\n

        $ publish.py serve                     # Serve on $PORT or 8081

        $ publish.py serve -p 9000 -c me.yaml  # Custom port and config
    """
    if port is None:
        try:
            port = resolve_port()
        except ValueError as e:
            fail(str(e))

    setup_delivery_logger(session_log_dir("serve"), mode="serve", extra={"Port": port})
    resume = load_or_exit(config)

    typer.secho(f"\nServing {resume.personal.name or config}", fg=typer.colors.BLUE, bold=True)
    run_server(resume, static_dir=static, port=port, host=host)


@app.command("build")
def build_command(
    config: ConfigOption = RESUME_CONFIG_PATH,
    static: StaticOption = STATIC_PATH,
    dist: Annotated[
        Path,
        typer.Option("--dist", "-d", help="Output directory"),
    ] = DIST_PATH,
    no_pdf: Annotated[
        bool,
        typer.Option("--no-pdf", help="Skip rendering static/resume.pdf"),
    ] = False,
    cname: Annotated[
        Optional[str],
        typer.Option("--cname", help="Custom domain to write into CNAME"),
    ] = None,
):
    """
    Build the static site.

    Writes index.html, copies the static directory, renders static/resume.pdf and
    adds .nojekyll (plus CNAME when --cname is given).

    Examples:\n

        $ publish.py build                          # Build dist/

        $ publish.py build --dist public --no-pdf   # HTML only, into public/
    """
    setup_delivery_logger(session_log_dir("build"), mode="build", extra={"Output": dist})
    resume = load_or_exit(config)

    try:
        result = build_static_site(
            resume,
            static_dir=static,
            dist_dir=dist,
            include_pdf=not no_pdf,
            cname=cname,
        )
    except (StaticBuildError, TemplateRenderError, PDFGenerationError) as e:
        fail(str(e))

    typer.echo("")
    typer.secho("✓ Static site generated", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Output: {result.dist_dir}")
    typer.echo(f"  Files: {len(result.written_files)}")
    if result.pdf_path:
        typer.echo(f"  PDF: {result.pdf_path} ({result.page_count or '?'} pages)")
    typer.echo("")


@app.command("pdf")
def pdf_command(
    output: Annotated[
        Path,
        typer.Argument(help="Where to write the PDF"),
    ] = Path("resume.pdf"),
    config: ConfigOption = RESUME_CONFIG_PATH,
):
    """
    Export the resume PDF to a file.

    Examples:\n

        $ publish.py pdf                        # Write ./resume.pdf

        $ publish.py pdf out/cv.pdf -c me.yaml  # Custom output and config
    """
    setup_rendering_logger(session_log_dir("pdf"), output_path=output)
    resume = load_or_exit(config)

    try:
        result = write_resume_pdf(resume, output)
    except PDFGenerationError as e:
        fail(str(e))

    typer.echo("")
    typer.secho("✓ PDF generated", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  PDF: {result.pdf_path}")
    typer.echo(f"  Size: {result.num_bytes} bytes")
    typer.echo(f"  Pages: {result.page_count or '?'}")
    typer.echo("")


@app.command("validate")
def validate_command(config: ConfigOption = RESUME_CONFIG_PATH):
    """
    Load the configuration and report its sections.

    Exits with status 1 if the file is missing or malformed.
    """
    setup_templating_logger(session_log_dir("validate"), config_path=config)
    resume = load_or_exit(config)

    typer.echo("")
    typer.secho(f"✓ {config} is valid", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Name: {resume.personal.name or '(missing)'}")
    for section, count in resume.section_counts().items():
        status = count if count else typer.style("empty (section omitted)", fg=typer.colors.YELLOW)
        typer.echo(f"  {section.capitalize()}: {status}")
    typer.echo("")


if __name__ == "__main__":
    app()
