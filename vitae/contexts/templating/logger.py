"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[template]"


def setup_templating_logger(log_dir: Path, config_path: Path = None) -> Path:
    """
    Setup logger for templating context.

    Args:
        log_dir: Directory for this session
        config_path: Resume configuration being loaded (for provenance)

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="template",
        log_dir=log_dir,
        extra_provenance={"Config": config_path},
    )


# Wrapper functions with automatic [template] prefix


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [template] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [template] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [template] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level templating-specific logging helpers


def log_load_start(config_path: Path) -> None:
    """Log start of configuration loading."""
    _log_info(f"Loading resume data from {config_path}")


def log_load_result(config_path: Path, resume) -> None:
    """
    Log a successful load with per-section counts.

    Args:
        config_path: Path the resume was loaded from
        resume: ResumeData that was loaded
    """
    _log_success(f"Loaded resume for {resume.personal.name or '(unnamed)'}")
    for section, count in resume.section_counts().items():
        _log_debug(f"  {section}: {count}")
    _log_debug(f"  Source: {config_path}")


def log_load_failure(config_path: Path, error: Exception) -> None:
    """Log a failed load."""
    _log_error(f"Failed to load resume data from {config_path}")
    _log_error(f"  {error}")


def log_html_result(resume_name: str, html_length: int, elapsed_time: float) -> None:
    """Log a successful HTML render."""
    _log_debug(f"Rendered HTML for {resume_name}: {html_length} chars ({elapsed_time:.3f}s)")
