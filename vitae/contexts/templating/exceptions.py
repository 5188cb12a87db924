"""Custom exceptions for templating context."""

from pathlib import Path
from typing import Optional


class ParseError(ValueError):
    """
    Exception raised when the resume configuration cannot be loaded.

    Covers missing or unreadable files, invalid YAML, and YAML whose structure does
    not match the resume schema.

    Attributes:
        message: Error description
        path: Path to the configuration file
        field: Dotted location of the offending field (e.g., 'experience[1].description')
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        field: Optional[str] = None,
    ):
        self.message = message
        self.path = path
        self.field = field

        parts = [message]

        if field:
            parts.append(f"Field: {field}")

        if path:
            parts.append(f"File: {path}")

        super().__init__("\n".join(parts))


class TemplateRenderError(Exception):
    """
    Exception raised when HTML template rendering fails.

    Attributes:
        message: Error description
        template_name: Name of the template being rendered
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        template_name: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.template_name = template_name
        self.original_error = original_error

        parts = [message]

        if template_name:
            parts.append(f"Template: {template_name}")

        if original_error:
            parts.append(f"Original error: {str(original_error)}")

        super().__init__("\n".join(parts))
