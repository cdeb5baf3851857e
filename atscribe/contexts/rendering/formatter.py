"""
Résumé Formatter

Single entry point for producing a résumé document in any supported format:

    Résumé -> MarkdownRenderer -> Markdown -> {PlainText, HTML}
    Résumé -> intake serializer -> JSON

PDF is not supported and raises UnsupportedFormatError.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from atscribe.contexts.intake.resume_data_structure import Resume
from atscribe.contexts.intake.serializer import resume_to_json
from atscribe.contexts.rendering.exceptions import TemplateNotFoundError, UnsupportedFormatError
from atscribe.contexts.rendering.html_converter import MarkdownToHTMLConverter
from atscribe.contexts.rendering.logger import _log_debug
from atscribe.contexts.rendering.markdown_renderer import MarkdownRenderer
from atscribe.contexts.rendering.options import FormattingOptions, OutputFormat
from atscribe.contexts.rendering.plaintext import markdown_to_plaintext
from atscribe.contexts.rendering.template_registry import TemplateRegistry

PDF_UNSUPPORTED_MESSAGE = "PDF output requires additional setup"


@dataclass
class FormattingResult:
    """
    Result of formatting a résumé.

    Attributes:
        content: Rendered document
        format: Format of content
        warnings: Advisory content warnings (missing sections, unbalanced
                  emphasis markers). Never indicate failure.
    """

    content: str
    format: OutputFormat
    warnings: List[str] = field(default_factory=list)


class ResumeFormatter:
    """
    Formats résumés according to a fixed set of options.

    Templates are loaded when the formatter is built; format() does no I/O and
    keeps no state between calls, so a formatter can be shared.
    """

    def __init__(
        self,
        options: Optional[FormattingOptions] = None,
        registry: Optional[TemplateRegistry] = None,
    ):
        """
        Initialize formatter.

        Args:
            options: Formatting options (default: FormattingOptions())
            registry: Template registry (default: bundled/ATSCRIBE_TEMPLATES_PATH templates)
        """
        self.options = options or FormattingOptions()
        self.registry = registry if registry is not None else TemplateRegistry()
        self.renderer = MarkdownRenderer(self.options)
        self.html_converter = MarkdownToHTMLConverter()

    def load_template_from_file(self, name: str, path: Path) -> None:
        """
        Register a custom template.

        Raises:
            TemplateFileReadError: If the file cannot be read
        """
        self.registry.load_template_from_file(name, path)

    def format(self, resume: Resume, output_format: OutputFormat) -> FormattingResult:
        """
        Render a résumé in the requested format.

        Args:
            resume: Résumé record (not modified)
            output_format: Desired output format

        Returns:
            FormattingResult with content and advisory warnings

        Raises:
            TemplateNotFoundError: Configured template is not registered
            UnsupportedFormatError: PDF requested
            SerializationError: JSON encoding failed
        """
        if not self.registry.has_template(self.options.template):
            raise TemplateNotFoundError(self.options.template, self.registry.names())

        warnings: List[str] = []
        _log_debug(f"Formatting as {output_format.value} with template '{self.options.template}'")

        if output_format is OutputFormat.MARKDOWN:
            content = self._format_markdown(resume, warnings)
        elif output_format is OutputFormat.PLAINTEXT:
            content = markdown_to_plaintext(self._format_markdown(resume, warnings))
        elif output_format is OutputFormat.JSON:
            content = resume_to_json(resume)
        elif output_format is OutputFormat.HTML:
            content = self._format_html(resume, warnings)
        else:
            raise UnsupportedFormatError(output_format, PDF_UNSUPPORTED_MESSAGE)

        return FormattingResult(content=content, format=output_format, warnings=warnings)

    def _format_markdown(self, resume: Resume, warnings: List[str]) -> str:
        # Template content is only checked for existence; the layout is fixed
        self.registry.get_template(self.options.template)

        markdown, render_warnings = self.renderer.render(resume)
        warnings.extend(render_warnings)
        return markdown

    def _format_html(self, resume: Resume, warnings: List[str]) -> str:
        markdown = self._format_markdown(resume, warnings)
        html, html_warnings = self.html_converter.convert(markdown, resume.profile.name)
        warnings.extend(html_warnings)
        return html
