"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

from atscribe.utils.logger import setup_logger as _setup_logger

load_dotenv()

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, output_format: Optional[str] = None) -> Path:
    """
    Setup logger for rendering context.

    Configures loguru with provenance tracking and rendering-specific context.

    Args:
        log_dir: Directory for this rendering session
        output_format: Requested output format, recorded in the provenance header

    Returns:
        Path to log file

    Example:
        from atscribe.contexts.rendering.logger import setup_rendering_logger

        log_file = setup_rendering_logger(log_dir, output_format="html")
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={
            "Output format": output_format or "markdown",
            "Templates path": os.getenv("ATSCRIBE_TEMPLATES_PATH", "(bundled)"),
        },
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_format_start(resume_name: str, output_format: str, template: str) -> None:
    """Log start of formatting with context."""
    _log_info(f"Formatting {resume_name} as {output_format}")
    _log_debug(f"  Template: {template}")


def log_format_result(resume_name: str, result, verbose: bool = False) -> None:
    """
    Log formatting result with content warnings.

    Args:
        resume_name: Résumé identifier
        result: FormattingResult from ResumeFormatter.format()
        verbose: Log every warning instead of the first few
    """
    _log_success(
        f"{resume_name}: {len(result.content)} characters of {result.format.value} "
        f"({len(result.warnings)} warnings)"
    )

    if result.warnings:
        warning_limit = len(result.warnings) if verbose else 3
        for i, warn in enumerate(result.warnings[:warning_limit], 1):
            _log_warning(f"  Warning {i}: {warn}")
        if len(result.warnings) > warning_limit:
            _log_debug(f"  ... and {len(result.warnings) - warning_limit} more warnings")
