"""
Job description loading for the Intake context.

Job descriptions are plain text or Markdown files. They are read and
normalized here so the Targeting context only ever sees clean text.
"""

from pathlib import Path

from atscribe.contexts.intake.logger import _log_debug
from atscribe.contexts.intake.normalizer import preprocess_job_description


def load_job_description(path: Path) -> str:
    """
    Read and normalize a job description file.

    Args:
        path: Text or Markdown file

    Returns:
        Normalized job description text

    Raises:
        FileNotFoundError: If path does not exist
    """
    if isinstance(path, str):
        path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Job description not found: {path}")

    text = preprocess_job_description(path.read_text(encoding="utf-8"))
    _log_debug(f"Loaded job description {path.name} ({len(text.split())} words)")
    return text
