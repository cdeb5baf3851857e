"""
Targeting context logger.

Provides logging interface for targeting context with automatic [target] prefix.
All targeting modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import List, Optional

from loguru import logger

from atscribe.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[target]"


def setup_targeting_logger(log_dir: Path, industries: Optional[List[str]] = None) -> Path:
    """
    Setup logger for targeting context.

    Args:
        log_dir: Directory for this optimization session
        industries: Industry dictionaries in use, recorded in the provenance header

    Returns:
        Path to log file
    """
    extra = {"Industries": ", ".join(industries)} if industries else None
    return _setup_logger(context_name="target", log_dir=log_dir, extra_provenance=extra)


# Wrapper functions with automatic [target] prefix


def _log_info(message: str) -> None:
    """Log info message with [target] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [target] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [target] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [target] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [target] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level targeting-specific logging helpers


def log_optimization_result(resume_name: str, result) -> None:
    """
    Log a keyword-match summary.

    Args:
        resume_name: Résumé identifier
        result: OptimizationResult from ResumeOptimizer.optimize()
    """
    _log_success(f"{resume_name}: match score {result.score}/100")
    _log_info(
        f"  {len(result.matching_keywords)} matching, "
        f"{len(result.missing_keywords)} missing, "
        f"{len(result.overused_keywords)} overused keywords"
    )

    if result.missing_keywords:
        _log_debug(f"  Missing: {', '.join(sorted(result.missing_keywords))}")

    for suggestion in result.suggestions:
        _log_debug(f"  Suggestion: {suggestion}")

    for section, improvements in result.section_improvements.items():
        for improvement in improvements:
            _log_debug(f"  {section}: {improvement}")
