"""
Markdown Pattern Constants

Markdown syntax produced by the renderer and recognized by the derived-format
converters. Organized into frozen dataclasses by category for immutability and
clear grouping.
"""

import re
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class HeadingPatterns:
    """
    Heading prefixes and the trailing markers that close them.

    Closing tags are inferred from a trailing " #", " ##" or " ###" at the end
    of a line, independently of which heading (if any) the line opened.
    """
    # (prefix, level), checked in order
    OPENERS: Tuple[Tuple[str, int], ...] = (("# ", 1), ("## ", 2), ("### ", 3))
    # (suffix, level), longest first so " ###" is not read as " #"
    CLOSERS: Tuple[Tuple[str, int], ...] = ((" ###", 3), (" ##", 2), (" #", 1))


@dataclass(frozen=True)
class ListPatterns:
    """Bullet prefixes recognized as list items."""
    BULLETS: Tuple[str, ...] = ("- ", "* ")


@dataclass(frozen=True)
class InlinePatterns:
    """
    Inline markup regexes.

    BOLD is matched before ITALIC, so "**" is always consumed as one bold
    marker rather than two italic ones.
    """
    LINK: str = r"\[(.*?)\]\((.*?)\)"
    BOLD: str = r"\*\*|__"
    ITALIC: str = r"[*_]"


@dataclass(frozen=True)
class PlainTextPatterns:
    """Markup characters removed from every line of plain-text output."""
    STRIP_CHARS: Tuple[str, ...] = ("#", "*", "_")
    LINK_REPLACEMENT: str = r"\1 (\2)"


HEADINGS = HeadingPatterns()
LISTS = ListPatterns()
INLINE = InlinePatterns()
PLAINTEXT = PlainTextPatterns()

LINK_RE = re.compile(INLINE.LINK)
BOLD_RE = re.compile(INLINE.BOLD)
ITALIC_RE = re.compile(INLINE.ITALIC)
