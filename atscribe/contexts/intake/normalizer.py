"""
Job description cleanup for the Intake context.

Job postings are mostly pasted from career sites, so they arrive with
typographic unicode. Industry phrases are matched as substrings ("rest api",
"ci/cd"), and a non-breaking space or zero-width joiner inside one silently
drops it from the score. Cleanup runs before any keyword is extracted.
"""

import re
import unicodedata

# Applied after NFKC, which leaves these code points alone
JOB_TEXT_REPLACEMENTS = {
    # Spacing that breaks multi-word phrases
    "\u00a0": " ",
    "\u202f": " ",
    # Invisible joiners that split a keyword in two
    "\u200b": "",
    "\u200c": "",
    "\u200d": "",
    "\u2060": "",
    "\ufeff": "",
    # Curly quotes around skill names
    "\u2018": "'",
    "\u2019": "'",
    "\u201c": '"',
    "\u201d": '"',
    # Date ranges and asides
    "\u2013": "-",
    "\u2014": "--",
    # Requirement list bullets
    "\u2022": "*",
    "\u00b7": "*",
    "\u2026": "...",
}


def normalize_unicode(text: str) -> str:
    """
    Fold a posting's typographic characters to ASCII.

    NFKC expands ligatures and full-width letters; the replacement table
    covers spaces, quotes, dashes and bullets.
    """
    text = unicodedata.normalize("NFKC", text)
    for char, replacement in JOB_TEXT_REPLACEMENTS.items():
        text = text.replace(char, replacement)
    return text


def normalize_line_endings(text: str) -> str:
    return re.sub(r"\r\n?", "\n", text)


def preprocess_job_description(text: str) -> str:
    """
    Clean a raw job posting for keyword extraction.

    Args:
        text: Posting as read from disk or pasted by the user

    Returns:
        ASCII-folded text with LF line endings and no surrounding whitespace
    """
    return normalize_line_endings(normalize_unicode(text)).strip()
