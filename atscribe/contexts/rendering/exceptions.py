"""Custom exceptions for the rendering context."""

from pathlib import Path
from typing import Iterable, Optional


class FormattingError(Exception):
    """Base class for failures while producing a résumé document."""

    pass


class TemplateNotFoundError(FormattingError):
    """
    Exception raised when the configured template name is not registered.

    Attributes:
        template_name: Name that was requested
        available: Names registered at the time of the request
    """

    def __init__(self, template_name: str, available: Optional[Iterable[str]] = None):
        self.template_name = template_name
        self.available = sorted(available or [])

        parts = [f"Template '{template_name}' not found"]

        if self.available:
            parts.append(f"Available templates: {', '.join(self.available)}")

        super().__init__("\n".join(parts))


class TemplateFileReadError(FormattingError):
    """
    Exception raised when a custom template file cannot be read.

    Attributes:
        template_name: Name the template was to be registered under
        path: File that failed to load
        original_error: The underlying OSError
    """

    def __init__(
        self,
        template_name: str,
        path: Path,
        original_error: Optional[Exception] = None,
    ):
        self.template_name = template_name
        self.path = path
        self.original_error = original_error

        parts = [f"Failed to read template file: {path}"]

        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))


class UnsupportedFormatError(FormattingError):
    """
    Exception raised for output formats that cannot be produced.

    Attributes:
        output_format: The requested OutputFormat
    """

    def __init__(self, output_format, message: str):
        self.output_format = output_format
        self.message = message
        super().__init__(message)
