"""
Environment-backed settings.

Values come from the process environment, optionally seeded from a .env file in the
working directory. Every operation that uses these also accepts explicit arguments.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_PORT = 8081

RESUME_CONFIG_PATH = Path(os.getenv("RESUME_CONFIG_PATH", "config.yaml"))
STATIC_PATH = Path(os.getenv("STATIC_PATH", "static"))
DIST_PATH = Path(os.getenv("DIST_PATH", "dist"))
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))


def resolve_port(value: Optional[str] = None) -> int:
    """
    Resolve the HTTP port from a raw string (defaults to the PORT environment variable).

    Unset or blank values fall back to DEFAULT_PORT.

    Raises:
        ValueError: If the value is not a valid TCP port number
    """
    if value is None:
        value = os.getenv("PORT")

    if value is None or not value.strip():
        return DEFAULT_PORT

    try:
        port = int(value.strip())
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {value!r}") from None

    if not 0 < port < 65536:
        raise ValueError(f"PORT out of range: {port}")

    return port
