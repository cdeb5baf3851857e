"""
Rendering Context

Responsibilities:
- Renders résumé records to Markdown with a fixed layout
- Derives PlainText and HTML from the rendered Markdown
- Delegates JSON output to the intake serializer
- Manages named Markdown templates

Owns: Formatting options, template registry, Markdown/PlainText/HTML conversion
Never: Modifies résumé records or scores keyword coverage
"""

from atscribe.contexts.rendering.exceptions import (
    FormattingError,
    TemplateFileReadError,
    TemplateNotFoundError,
    UnsupportedFormatError,
)
from atscribe.contexts.rendering.formatter import FormattingResult, ResumeFormatter
from atscribe.contexts.rendering.html_converter import MarkdownToHTMLConverter
from atscribe.contexts.rendering.markdown_renderer import MarkdownRenderer
from atscribe.contexts.rendering.options import (
    FormattingOptions,
    OutputFormat,
    ResumeSection,
    SectionOptions,
)
from atscribe.contexts.rendering.plaintext import markdown_to_plaintext
from atscribe.contexts.rendering.template_registry import TemplateRegistry

__all__ = [
    # Entry point
    "ResumeFormatter",
    "FormattingResult",
    # Options
    "FormattingOptions",
    "OutputFormat",
    "ResumeSection",
    "SectionOptions",
    # Components
    "MarkdownRenderer",
    "MarkdownToHTMLConverter",
    "markdown_to_plaintext",
    "TemplateRegistry",
    # Exceptions
    "FormattingError",
    "TemplateNotFoundError",
    "TemplateFileReadError",
    "UnsupportedFormatError",
]
