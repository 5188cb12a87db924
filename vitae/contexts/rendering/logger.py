"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, output_path: Path = None) -> Path:
    """
    Setup logger for rendering context.

    Args:
        log_dir: Directory for this rendering session
        output_path: Where the PDF will be written (for provenance)

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"PDF output": output_path},
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_pdf_start(resume_name: str, num_rows: int) -> None:
    """Log start of PDF generation."""
    _log_info(f"Generating PDF: {resume_name or '(unnamed)'}")
    _log_debug(f"  Layout rows: {num_rows}")


def log_pdf_result(resume_name: str, num_bytes: int, elapsed_time: float) -> None:
    """Log a successful PDF generation."""
    _log_success(f"{resume_name or '(unnamed)'}: {num_bytes} bytes ({elapsed_time:.2f}s)")


def log_pdf_failure(resume_name: str, error: Exception, elapsed_time: float) -> None:
    """Log a failed PDF generation."""
    _log_error(f"PDF generation failed for {resume_name or '(unnamed)'} ({elapsed_time:.2f}s)")
    _log_error(f"  Error: {error}")
