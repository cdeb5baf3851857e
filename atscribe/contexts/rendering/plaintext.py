"""
Plain-text conversion of rendered Markdown.

Line-by-line stripping of Markdown markup; no parsing. Each output line
corresponds to exactly one Markdown line, so blank lines and ordering survive.
"""

from atscribe.contexts.rendering.markdown_patterns import LINK_RE, PLAINTEXT


def strip_markup(line: str) -> str:
    """
    Strip heading/emphasis characters and flatten links in a single line.

    Example:
        >>> strip_markup("**Link:** [Project Link](https://example.com)")
        'Link: Project Link (https://example.com)'
    """
    for char in PLAINTEXT.STRIP_CHARS:
        line = line.replace(char, "")
    return LINK_RE.sub(PLAINTEXT.LINK_REPLACEMENT, line)


def markdown_to_plaintext(markdown: str) -> str:
    """
    Convert rendered Markdown to plain text.

    Removes every '#', '*' and '_' character, then rewrites [text](url) as
    "text (url)". Every output line, including the last, ends with a newline.

    Args:
        markdown: Output of MarkdownRenderer.render()

    Returns:
        Plain text
    """
    lines = markdown.split("\n")
    # A trailing newline does not start another line
    if lines and lines[-1] == "":
        lines.pop()

    return "".join(f"{strip_markup(line)}\n" for line in lines)
