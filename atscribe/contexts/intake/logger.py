"""
Intake context logger.

Provides logging interface for intake context with automatic [intake] prefix.
All intake modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from atscribe.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[intake]"


def setup_intake_logger(log_dir: Path) -> Path:
    """
    Setup logger for intake context.

    Args:
        log_dir: Directory for this session

    Returns:
        Path to log file
    """
    return _setup_logger(context_name="intake", log_dir=log_dir)


# Wrapper functions with automatic [intake] prefix


def _log_info(message: str) -> None:
    """Log info message with [intake] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [intake] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [intake] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level intake-specific logging helpers


def log_validation_result(resume_name: str, errors: list) -> None:
    """
    Log the outcome of résumé validation.

    Args:
        resume_name: Résumé identifier (usually the file stem)
        errors: ResumeValidationError instances (empty when valid)
    """
    if not errors:
        _log_success(f"{resume_name}: validation passed")
        return

    _log_error(f"{resume_name}: validation failed with {len(errors)} error(s)")
    for error in errors:
        location = f" ({error.field})" if error.field else ""
        _log_error(f"  {error.message}{location}")
