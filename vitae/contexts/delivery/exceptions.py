"""Custom exceptions for delivery context."""

from pathlib import Path
from typing import Optional


class StaticBuildError(RuntimeError):
    """
    Exception raised when the static site cannot be built.

    Attributes:
        message: Error description
        path: Path involved in the failure
    """

    def __init__(self, message: str, path: Optional[Path] = None):
        self.message = message
        self.path = path

        if path:
            message = f"{message}: {path}"

        super().__init__(message)
