"""Custom exceptions for rendering context."""

from typing import Optional


class PDFGenerationError(RuntimeError):
    """
    Exception raised when the PDF backend fails to produce a document.

    No partial output accompanies this error; whatever the backend had built is
    discarded.

    Attributes:
        message: Error description
        original_error: The exception raised by the backend
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.message = message
        self.original_error = original_error

        if original_error:
            message = f"{message}: {original_error}"

        super().__init__(message)
