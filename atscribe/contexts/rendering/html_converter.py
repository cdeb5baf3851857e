"""
HTML conversion of rendered Markdown.

This is an approximation of Markdown, not a parser. The converter runs as a
small state machine in a fixed order:

1. Line pass: each line is classified (heading, list item, text). Headings
   and list items are only recognized on lines that follow a newline, so the
   first line of the document is always text. Closing heading tags come from a
   trailing " #", " ##" or " ###" on any line that is followed by a newline.
   Runs of consecutive list items are wrapped in one <ul>.
2. Bold pass: "**" and "__" markers are paired left to right in document order.
3. Italic pass: remaining "*" and "_" characters, paired the same way. Markers
   are plain characters, so underscores inside URLs count.
4. Links: [text](url) becomes an anchor.
5. Paragraphs: blank lines split the body into <p> blocks.

An unpaired emphasis marker is left as an opening tag and reported as a
warning; it never fails the conversion.
"""

import re
from enum import Enum
from typing import List, Optional, Tuple

from atscribe.contexts.rendering.logger import _log_debug
from atscribe.contexts.rendering.markdown_patterns import (
    BOLD_RE,
    HEADINGS,
    ITALIC_RE,
    LINK_RE,
    LISTS,
)

MISMATCHED_BOLD_WARNING = "Mismatched bold markers in content"
MISMATCHED_ITALIC_WARNING = "Mismatched italic markers in content"

STYLESHEET = (
    "body { font-family: Arial, sans-serif; line-height: 1.6; max-width: 800px; "
    "margin: 0 auto; padding: 20px; }\n"
    "h1, h2, h3 { color: #333; }\n"
    "h1 { border-bottom: 2px solid #333; padding-bottom: 10px; }\n"
    "h2 { border-bottom: 1px solid #ddd; padding-bottom: 5px; margin-top: 20px; }\n"
    "ul { margin-top: 5px; }\n"
)


class LineKind(Enum):
    HEADING = "heading"
    LIST_ITEM = "list_item"
    TEXT = "text"


def _open_heading(line: str) -> Tuple[LineKind, str]:
    for prefix, level in HEADINGS.OPENERS:
        if line.startswith(prefix):
            return LineKind.HEADING, f"<h{level}>{line[len(prefix):]}"
    return LineKind.TEXT, line


def _close_heading(line: str) -> str:
    for suffix, level in HEADINGS.CLOSERS:
        if line.endswith(suffix):
            return f"{line[: -len(suffix)]}</h{level}>"
    return line


def _open_list_item(line: str) -> Optional[str]:
    for bullet in LISTS.BULLETS:
        if line.startswith(bullet):
            return f"<li>{line[len(bullet):]}</li>"
    return None


def pair_markers(content: str, pattern: re.Pattern, tag: str) -> Tuple[str, bool]:
    """
    Replace emphasis markers with matched open/close tags, left to right.

    Markers are numbered in document order; with n markers the first
    n // 2 * 2 alternate open, close, open, close. A final odd marker stays
    an opening tag.

    Args:
        content: Text containing markers
        pattern: Regex matching one marker
        tag: Tag name (e.g. 'strong')

    Returns:
        Tuple of (converted text, True if every marker was paired)

    Example:
        >>> pair_markers("a **b** c **d", BOLD_RE, "strong")
        ('a <strong>b</strong> c <strong>d', False)
    """
    markers = list(pattern.finditer(content))
    paired = len(markers) - len(markers) % 2

    pieces = []
    position = 0
    for index, match in enumerate(markers):
        pieces.append(content[position : match.start()])
        closing = index < paired and index % 2 == 1
        pieces.append(f"</{tag}>" if closing else f"<{tag}>")
        position = match.end()
    pieces.append(content[position:])

    return "".join(pieces), paired == len(markers)


class MarkdownToHTMLConverter:
    """Converts rendered résumé Markdown into a standalone HTML page."""

    def convert(self, markdown: str, name: str) -> Tuple[str, List[str]]:
        """
        Convert Markdown to an HTML document.

        Args:
            markdown: Output of MarkdownRenderer.render()
            name: Profile name, used for the page title

        Returns:
            Tuple of (html, warnings)
        """
        warnings: List[str] = []

        body = self.convert_lines(markdown)

        body, balanced = pair_markers(body, BOLD_RE, "strong")
        if not balanced:
            warnings.append(MISMATCHED_BOLD_WARNING)

        body, balanced = pair_markers(body, ITALIC_RE, "em")
        if not balanced:
            warnings.append(MISMATCHED_ITALIC_WARNING)

        body = LINK_RE.sub(r'<a href="\2">\1</a>', body)
        body = self.wrap_paragraphs(body)

        _log_debug(f"Converted markdown to HTML ({len(warnings)} warnings)")
        return self.wrap_document(body, name), warnings

    def convert_lines(self, markdown: str) -> str:
        """
        Convert headings and list items, line by line.

        Example:
            >>> MarkdownToHTMLConverter().convert_lines("x\\n- a\\n- b\\nend")
            'x\\n<ul><li>a</li>\\n<li>b</li></ul>\\nend'
        """
        lines = markdown.split("\n")
        last_index = len(lines) - 1
        converted: List[str] = []
        in_list = False

        for index, line in enumerate(lines):
            kind = LineKind.TEXT
            follows_newline = index > 0

            if follows_newline:
                kind, line = _open_heading(line)

            if index < last_index:
                line = _close_heading(line)

            if follows_newline and kind is LineKind.TEXT:
                item = _open_list_item(line)
                if item is not None:
                    kind, line = LineKind.LIST_ITEM, item

            if kind is LineKind.LIST_ITEM and not in_list:
                line = f"<ul>{line}"
            elif kind is not LineKind.LIST_ITEM and in_list:
                converted[-1] += "</ul>"
            in_list = kind is LineKind.LIST_ITEM

            converted.append(line)

        if in_list:
            converted[-1] += "</ul>"

        return "\n".join(converted)

    def wrap_paragraphs(self, body: str) -> str:
        return "<p>" + body.replace("\n\n", "\n</p>\n<p>\n") + "</p>"

    def wrap_document(self, body: str, name: str) -> str:
        """Wrap a converted body in the HTML page shell."""
        return (
            "<!DOCTYPE html>\n"
            '<html lang="en">\n'
            "<head>\n"
            '<meta charset="UTF-8">\n'
            '<meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
            f"<title>{name}'s Resume</title>\n"
            "<style>\n"
            f"{STYLESHEET}"
            "</style>\n"
            "</head>\n"
            "<body>\n"
            f"{body}"
            "\n</body>\n"
            "</html>"
        )
