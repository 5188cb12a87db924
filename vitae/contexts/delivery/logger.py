"""
Delivery context logger.

Provides logging interface for delivery context with automatic [deliver] prefix.
All delivery modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[deliver]"


def setup_delivery_logger(log_dir: Path, mode: str = "serve", extra: dict = None) -> Path:
    """
    Setup logger for delivery context.

    Args:
        log_dir: Directory for this session
        mode: "serve" or "build" (for provenance)
        extra: Additional provenance entries (port, output directory, ...)

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="deliver",
        log_dir=log_dir,
        extra_provenance={"Mode": mode, **(extra or {})},
    )


# Wrapper functions with automatic [deliver] prefix


def _log_info(message: str) -> None:
    """Log info message with [deliver] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [deliver] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [deliver] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [deliver] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [deliver] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level delivery-specific logging helpers


def log_server_start(port: int, static_dir: Path) -> None:
    """Log server startup."""
    _log_info(f"Starting server on http://localhost:{port}")
    _log_debug(f"  Static files: {static_dir}")


def log_request_failure(route: str, error: Exception) -> None:
    """Log a request that ended in HTTP 500."""
    _log_error(f"{route} failed")
    _log_error(f"  {error}")


def log_build_start(dist_dir: Path) -> None:
    """Log start of a static build."""
    _log_info(f"Building static site in {dist_dir}")


def log_build_result(result, elapsed_time: float) -> None:
    """
    Log static build result.

    Args:
        result: BuildResult from build_static_site()
        elapsed_time: Time taken
    """
    _log_success(f"Static site generated in {result.dist_dir} ({elapsed_time:.2f}s)")
    for path in result.written_files:
        _log_debug(f"  Wrote: {path}")


def request_context(request_id: str):
    """Tag every record logged inside the block with the request id."""
    return logger.contextualize(request=request_id)


def log_request(method: str, path: str, status_code: int, elapsed_time: float) -> None:
    """Log a completed request."""
    _log_debug(f"{method} {path} -> {status_code} ({elapsed_time * 1000:.0f}ms)")
