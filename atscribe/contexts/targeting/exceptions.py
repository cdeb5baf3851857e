"""Custom exceptions for the targeting context."""

from typing import Iterable, Optional


class IndustryNotFoundError(ValueError):
    """
    Exception raised when no keyword dictionary matches an industry name.

    Attributes:
        industry: The requested industry name
        available: Configured industry names
    """

    def __init__(self, industry: str, available: Optional[Iterable[str]] = None):
        self.industry = industry
        self.available = list(available or [])
        self.message = f"No keywords found for industry: {industry}"

        parts = [self.message]

        if self.available:
            parts.append(f"Configured industries: {', '.join(self.available)}")

        super().__init__("\n".join(parts))
