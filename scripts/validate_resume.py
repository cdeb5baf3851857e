#!/usr/bin/env python3
"""
Validate a résumé file and report every problem found.

Usage:
    python scripts/validate_resume.py data/resume.yaml
"""

import os
from pathlib import Path

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from atscribe.contexts.intake import SerializationError, collect_validation_errors, load_resume
from atscribe.contexts.intake.logger import log_validation_result, setup_intake_logger
from atscribe.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(help="Validate a résumé file.", add_completion=False)


@app.command()
def main(
    resume_path: Annotated[
        Path,
        typer.Argument(help="Résumé file (.json, .yaml or .yml)"),
    ],
):
    """Check required fields, date ranges, GPA, profile URLs and technical skills."""
    setup_intake_logger(LOGS_PATH / f"validate_{now()}")

    try:
        resume = load_resume(resume_path)
    except (FileNotFoundError, SerializationError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    errors = collect_validation_errors(resume)
    log_validation_result(resume_path.stem, errors)

    if not errors:
        typer.secho(f"✓ {resume_path.name} is valid", fg=typer.colors.GREEN)
        raise typer.Exit(code=0)

    typer.secho(f"✗ {resume_path.name}: {len(errors)} problem(s)", fg=typer.colors.RED)
    for error in errors:
        location = f" ({error.field})" if error.field else ""
        typer.echo(f"  - {error.message}{location}")
    raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
