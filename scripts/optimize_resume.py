#!/usr/bin/env python3
"""
Score a résumé against a job description and print improvement suggestions.

Usage:
    python scripts/optimize_resume.py data/resume.yaml data/jobs/backend.md
    python scripts/optimize_resume.py data/resume.yaml data/jobs/ds.md --industry "data science"
    python scripts/optimize_resume.py data/resume.yaml data/jobs/backend.md --json
"""

import json
import os
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from atscribe.contexts.intake import SerializationError, load_job_description, load_resume
from atscribe.contexts.targeting import IndustryNotFoundError, OptimizationResult, ResumeOptimizer
from atscribe.contexts.targeting.logger import log_optimization_result, setup_targeting_logger
from atscribe.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    help="Score résumé keyword coverage against a job description.", add_completion=False
)


def print_report(result: OptimizationResult) -> None:
    """Print a human-readable optimization report."""
    color = typer.colors.GREEN if result.score >= 70 else typer.colors.YELLOW
    typer.secho(f"\nMatch score: {result.score}/100", fg=color, bold=True)

    if result.matching_keywords:
        typer.echo("\nMatching keywords:")
        for keyword, count in sorted(result.matching_keywords.items()):
            typer.echo(f"  ✓ {keyword} ({count})")

    if result.missing_keywords:
        typer.echo("\nMissing keywords:")
        for keyword in sorted(result.missing_keywords):
            typer.echo(f"  ✗ {keyword}")

    if result.overused_keywords:
        typer.echo("\nOverused keywords:")
        for keyword in sorted(result.overused_keywords):
            typer.echo(f"  - {keyword}")

    if result.suggestions:
        typer.echo("\nSuggestions:")
        for suggestion in result.suggestions:
            typer.echo(f"  - {suggestion}")

    for section, improvements in result.section_improvements.items():
        typer.echo(f"\n{section}:")
        for improvement in improvements:
            typer.echo(f"  - {improvement}")

    typer.echo("")


@app.command()
def main(
    resume_path: Annotated[
        Path,
        typer.Argument(help="Résumé file (.json, .yaml or .yml)"),
    ],
    job_path: Annotated[
        Path,
        typer.Argument(help="Job description (text or Markdown)"),
    ],
    industry: Annotated[
        Optional[List[str]],
        typer.Option(
            "--industry", "-i", help="Industry keyword dictionary to load (repeatable)"
        ),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the result as JSON"),
    ] = False,
):
    """
    Score a résumé against a job description.

    Examples:\n

        $ optimize_resume.py resume.yaml job.md                        # Software development keywords

        $ optimize_resume.py resume.yaml job.md -i "data science"      # Data science keywords

        $ optimize_resume.py resume.yaml job.md --json                 # Machine-readable output
    """
    setup_targeting_logger(LOGS_PATH / f"optimize_{now()}", industries=industry)

    try:
        resume = load_resume(resume_path)
        job_description = load_job_description(job_path)
        optimizer = ResumeOptimizer(industries=industry)
    except (FileNotFoundError, SerializationError, IndustryNotFoundError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    result = optimizer.optimize(resume, job_description)
    log_optimization_result(resume_path.stem, result)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
    else:
        print_report(result)


if __name__ == "__main__":
    app()
