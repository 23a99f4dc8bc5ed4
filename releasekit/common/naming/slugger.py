# releasekit/common/naming/slugger.py
from __future__ import annotations

import re

_DROP_CHARS = ":'\"/\\?!*<>|#%(){}[],;-"
_TITLE_TABLE = str.maketrans({**{ch: None for ch in _DROP_CHARS}, "&": "and", "@": "at"})

_space_re = re.compile(r"\s+")
_dots_re = re.compile(r"\.+")


def sanitize_title(text: str | None) -> str:
    """
    Scene-style title: dotted, no punctuation.
      - drop  : ' " / \\ ? ! * < > | # % ( ) { } [ ] , ; -
      - '&' -> 'and', '@' -> 'at'
      - whitespace -> '.'
      - collapse repeated dots, trim leading/trailing dots

    Substitution runs before the dot collapse, so
      "Spider-Man: No Way Home" -> "SpiderMan.No.Way.Home"
      "Fast & Furious 6"        -> "Fast.and.Furious.6"
    The result is a fixed point: sanitize_title(sanitize_title(x)) == sanitize_title(x).
    """
    if text is None:
        return ""
    value = str(text).translate(_TITLE_TABLE)
    value = _space_re.sub(".", value)
    value = _dots_re.sub(".", value)
    return value.strip(".")
