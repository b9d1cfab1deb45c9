"""Plain-text excerpts of post bodies for feed item descriptions."""

import re

from postkit.constants import DEFAULT_DESCRIPTION_LENGTH

ELLIPSIS = "..."
_WORD_BOUNDARY_RATIO = 0.8

_HEADER_BLOCK = re.compile(r"\A---[\s\S]*?---\s*")
_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")

# Applied in order: headings, bold, italic, links, fenced code, inline code, list markers.
_MARKUP_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"^#{1,6}\s+", re.MULTILINE), ""),
    (re.compile(r"\*\*(.*?)\*\*"), r"\1"),
    (re.compile(r"\*(.*?)\*"), r"\1"),
    (re.compile(r"\[([^\]]+)\]\([^)]+\)"), r"\1"),
    (re.compile(r"```[\s\S]*?```"), ""),
    (re.compile(r"`([^`]+)`"), r"\1"),
    (re.compile(r"^[-*+]\s+", re.MULTILINE), ""),
    (re.compile(r"^\d+\.\s+", re.MULTILINE), ""),
)
_WHITESPACE_RUN = re.compile(r"\s+")


def _first_paragraph(text: str) -> str:
    for paragraph in _PARAGRAPH_BREAK.split(text):
        stripped = paragraph.strip()
        if stripped:
            return stripped
    return ""


def _strip_markup(text: str) -> str:
    for pattern, replacement in _MARKUP_RULES:
        text = pattern.sub(replacement, text)
    return _WHITESPACE_RUN.sub(" ", text).strip()


def _truncate(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    truncated = text[:max_length]
    last_space = truncated.rfind(" ")
    if last_space >= 0 and last_space >= max_length * _WORD_BOUNDARY_RATIO:
        return truncated[:last_space] + ELLIPSIS
    return truncated + ELLIPSIS


def extract_description(content: str | None, max_length: int = DEFAULT_DESCRIPTION_LENGTH) -> str:
    """Derive a short plain-text description from a post's markdown.

    Takes the first paragraph after any leading ``---`` header block, strips
    markdown markup and truncates to ``max_length`` characters, preferring a
    word boundary in the last fifth of the limit. Truncated text ends with
    ``...``.

    Only a header block at the very start is removed; a pair of ``---``
    rules further down the body is kept as text.

    Args:
        content: Markdown source, with or without a header block.
        max_length: Maximum length before the ellipsis is appended.

    Returns:
        The description, or an empty string when there is no text.

    Examples:
        >>> extract_description("---\\ntitle: x\\n---\\n\\nHello **world**, see [link](http://x).")
        'Hello world, see link.'
        >>> extract_description("")
        ''

    """
    if not content:
        return ""

    body = _HEADER_BLOCK.sub("", content, count=1)
    description = _strip_markup(_first_paragraph(body))
    return _truncate(description, max(max_length, 0))
