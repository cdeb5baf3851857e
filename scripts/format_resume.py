#!/usr/bin/env python3
"""
Render a résumé file as Markdown, plaintext, JSON or HTML.

Usage:
    python scripts/format_resume.py data/resume.yaml
    python scripts/format_resume.py data/resume.yaml --format html -o outs/resume.html
    python scripts/format_resume.py data/resume.json --exclude projects --no-contact
    python scripts/format_resume.py data/resume.yaml --date-format "%m/%Y"
"""

import os
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from atscribe.contexts.intake import SerializationError, load_resume
from atscribe.contexts.rendering import (
    FormattingError,
    FormattingOptions,
    OutputFormat,
    ResumeFormatter,
    ResumeSection,
    SectionOptions,
)
from atscribe.contexts.rendering.logger import (
    log_format_result,
    log_format_start,
    setup_rendering_logger,
)
from atscribe.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(help="Render a résumé file to a document format.", add_completion=False)


@app.command()
def main(
    resume_path: Annotated[
        Path,
        typer.Argument(help="Résumé file (.json, .yaml or .yml)"),
    ],
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", case_sensitive=False, help="Output format"),
    ] = OutputFormat.MARKDOWN,
    template: Annotated[
        str,
        typer.Option("--template", "-t", help="Registered template name"),
    ] = "modern",
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write to this file instead of stdout"),
    ] = None,
    no_contact: Annotated[
        bool,
        typer.Option("--no-contact", help="Omit the Contact Information block"),
    ] = False,
    exclude: Annotated[
        Optional[List[ResumeSection]],
        typer.Option(
            "--exclude", "-x", case_sensitive=False, help="Section to leave out (repeatable)"
        ),
    ] = None,
    date_format: Annotated[
        str,
        typer.Option("--date-format", help="strftime pattern for date ranges"),
    ] = "%B %Y",
):
    """
    Render a résumé.

    Examples:\n

        $ format_resume.py resume.yaml                         # Markdown to stdout

        $ format_resume.py resume.yaml -f html -o resume.html  # HTML file

        $ format_resume.py resume.yaml -x projects -x skills   # Skip sections
    """
    setup_rendering_logger(LOGS_PATH / f"format_{now()}", output_format.value)

    options = FormattingOptions(
        template=template,
        include_contact_info=not no_contact,
        date_format=date_format,
        sections=SectionOptions.excluding(exclude or []),
    )
    log_format_start(resume_path.stem, output_format.value, template)

    try:
        resume = load_resume(resume_path)
        result = ResumeFormatter(options).format(resume, output_format)
    except (FileNotFoundError, SerializationError, FormattingError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    log_format_result(resume_path.stem, result)

    if output is None:
        typer.echo(result.content)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(result.content, encoding="utf-8")
    typer.secho(f"✓ Wrote {output}", fg=typer.colors.GREEN, err=True)


if __name__ == "__main__":
    app()
