"""
Generic logger setup utilities.

Configures loguru for one run of a command: a DEBUG log file in the session
directory, colorized INFO output on the console, and a provenance header.

Every record carries a `request` field. It is "-" outside of HTTP requests; the
server binds a short id per request so interleaved requests can be told apart.
Context-specific wrappers live in contexts/{context}/logger.py.
"""

import platform
import sys
from pathlib import Path

from loguru import logger

from vitae import __version__

# Default level colors for console output
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

NO_REQUEST = "-"

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {extra[request]: <8} | {message}"
CONSOLE_FORMAT = (
    "{time:HH:mm:ss} | <level>{level: <7}</level> | "
    "<dim>{extra[request]: <8}</dim> | <level>{message}</level>"
)


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: dict = None,
    level_colors: dict = None,
) -> Path:
    """
    Configure loguru for a context and log the provenance header.

    Args:
        context_name: Context identifier ("template", "render", "deliver")
        log_dir: Directory for this logging session (created if missing)
        extra_provenance: Additional key-value pairs for the provenance header
        level_colors: Override default level colors (e.g., {"INFO": "<cyan>"})

    Returns:
        Path to the log file, e.g. outs/logs/serve_20251114_123456/deliver.log
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.configure(extra={"request": NO_REQUEST})

    for level_name, color in {**LEVEL_COLORS, **(level_colors or {})}.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    log_provenance({"Context": context_name, "Log file": log_file, **(extra_provenance or {})})
    return log_file


def collect_provenance() -> dict:
    """Describe the current process: command line, directory, interpreter and version."""
    return {
        "Command": " ".join(sys.argv),
        "Working directory": Path.cwd(),
        "Python": platform.python_version(),
        "vitae": __version__,
    }


def log_provenance(extra_context: dict = None) -> None:
    """Log the provenance header, followed by any extra key-value pairs."""
    logger.info("=" * 80)
    for key, value in {**collect_provenance(), **(extra_context or {})}.items():
        logger.info(f"{key}: {value}")
    logger.info("=" * 80)
