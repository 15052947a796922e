"""Line-oriented classification of semi-markdown report text into content blocks."""

from __future__ import annotations

from medscribe.models import ContentBlock

_BULLET_PREFIXES = ("- ", "* ")


def classify_line(line: str) -> ContentBlock:
    """Classify one physical line; no lookahead, first matching rule wins."""
    if not line.strip():
        return ContentBlock.blank(raw=line)
    if line.startswith("## "):
        return ContentBlock.heading(2, line[3:], raw=line)
    if line.startswith("# "):
        return ContentBlock.heading(1, line[2:], raw=line)
    if line.startswith("**") and line.endswith("**"):
        return ContentBlock.bold(line.replace("**", ""), raw=line)
    if line.startswith(_BULLET_PREFIXES):
        return ContentBlock.bullet(line[2:], raw=line)
    return ContentBlock.paragraph(line)


def split_lines(text: str) -> list[str]:
    """Split on ``\\n`` only; a trailing ``\\r`` is dropped from each line.

    Other separators ``str.splitlines`` honours (form feed, NEL, U+2028, ...)
    stay inside their line.  A trailing newline yields a final empty line.
    """
    if not text:
        return []
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def parse(text: str) -> tuple[ContentBlock, ...]:
    """Split *text* into one block per physical line, in source order.

    Blank lines are kept as ``BLANK`` blocks; renderers use them as
    paragraph spacing.  Empty input yields no blocks.
    """
    return tuple(classify_line(line) for line in split_lines(text))
