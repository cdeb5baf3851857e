"""Custom exceptions for the intake context."""

from pathlib import Path
from typing import Optional


class ResumeValidationError(ValueError):
    """
    Exception raised when a résumé record fails validation.

    Attributes:
        message: Error description
        field: Dotted path of the offending field (e.g. 'profile.email')
    """

    def __init__(self, message: str, field: Optional[str] = None):
        self.message = message
        self.field = field
        super().__init__(message)


class DateRangeError(ResumeValidationError):
    """
    End date earlier than start date on a dated entry.

    Attributes:
        entry_name: Company, institution or project the entry belongs to
    """

    def __init__(self, section: str, entry_name: str, field: Optional[str] = None):
        self.section = section
        self.entry_name = entry_name
        super().__init__(
            f"Invalid dates for {section} at {entry_name}: end date before start date",
            field=field,
        )


class GPARangeError(ResumeValidationError):
    """GPA outside the 0.0 - 4.0 scale."""

    def __init__(self, institution: str, gpa: float, field: Optional[str] = None):
        self.institution = institution
        self.gpa = gpa
        super().__init__(
            f"Invalid GPA for {institution}: must be between 0.0 and 4.0", field=field
        )


class MissingTechnicalSkillsError(ResumeValidationError):
    """Résumé lists no technical skills."""

    def __init__(self):
        super().__init__("At least one technical skill is required", field="skills.technical")


class SerializationError(Exception):
    """
    Exception raised when a résumé cannot be encoded or decoded.

    Attributes:
        message: Error description
        path: File being read or written, if any
        original_error: The underlying json/yaml/type error
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.path = path
        self.original_error = original_error

        parts = [message]

        if path:
            parts.append(f"File: {path}")

        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))
