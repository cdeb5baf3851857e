"""
Shared utilities for ATScribe.

Common functionality used across contexts:
- Keyword extraction and acronym normalization
- Vocabulary tables
- Logging setup
- Timestamps
"""

from atscribe.utils.timestamp import now
from atscribe.utils.token_processing import KeywordExtractor

__all__ = ["KeywordExtractor", "now"]
