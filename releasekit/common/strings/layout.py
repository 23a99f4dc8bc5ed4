# releasekit/common/strings/layout.py
from __future__ import annotations

from typing import List

ELLIPSIS = "..."


def truncate(text: str, width: int) -> str:
    """
    Cut `text` to at most `width` characters, ending with '...' when cut.
    Counts characters (code points), never bytes, so multi-byte text is not split.
    """
    if width <= 0:
        return ""
    if len(text) <= width:
        return text
    if width <= len(ELLIPSIS):
        return text[:width]
    return text[: width - len(ELLIPSIS)] + ELLIPSIS


def wrap_words(text: str, width: int) -> List[str]:
    """
    Greedy word wrap: pack whole words into lines of at most `width` characters.
    The current line is flushed when the next word would overflow; words are
    never split (a single word longer than `width` gets a line of its own).
    """
    lines: List[str] = []
    current = ""
    for word in text.split():
        if current and len(current) + 1 + len(word) > width:
            lines.append(current)
            current = ""
        current = f"{current} {word}" if current else word
    if current:
        lines.append(current)
    return lines
