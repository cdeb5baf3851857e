"""
Session logging for the ATScribe command-line scripts.

Each script run writes one log file per context (render.log, target.log,
intake.log) into a timestamped session directory, headed by a record of how
the run was invoked. Console output goes to stderr so rendered résumés can be
piped from stdout. Modules log through contexts/{context}/logger.py, which
prefix messages with the context name.
"""

import sys
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from loguru import logger

import atscribe

load_dotenv()

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"
)

# Warnings are content problems in the résumé, errors stop the script
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, str]] = None,
    level_colors: Optional[Dict[str, str]] = None,
) -> Path:
    """
    Point loguru at a session log file and stderr.

    Replaces any previously added sinks, so calling it again (as the CLI
    tests do) starts a fresh session rather than duplicating output.

    Args:
        context_name: "render", "target" or "intake"; names the log file
        log_dir: Session directory, created if missing
        extra_provenance: Run settings for the header (output format, industries)
        level_colors: Console color overrides, e.g. {"INFO": "<cyan>"}

    Returns:
        Path to <log_dir>/<context_name>.log

    Example:
        log_file = setup_logger(
            "render",
            Path("outs/logs/format_20251114_123456"),
            extra_provenance={"Output format": "html"},
        )
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()

    for level_name, color in {**LEVEL_COLORS, **(level_colors or {})}.items():
        logger.level(level_name, color=color)

    # Debug detail (template choice, keyword counts) only goes to the file
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: Optional[Dict[str, str]] = None) -> None:
    """
    Write the session header: ATScribe version, invocation and run settings.

    Args:
        extra_context: Context-specific settings, logged after the standard lines
    """
    logger.info("=" * 80)
    logger.info(f"ATScribe: {atscribe.__version__}")
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")

    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")

    logger.info("=" * 80)
