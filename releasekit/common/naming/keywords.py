# releasekit/common/naming/keywords.py
from __future__ import annotations

import re
from typing import List, Optional

_SCENE_PATTERNS: List[re.Pattern[str]] = [
    re.compile(p, re.IGNORECASE)
    for p in (
        r"\b(1080p|720p|2160p|4k|uhd|hdr|bluray|brrip|webrip|web-dl|hdtv|dvdrip)\b",
        r"\b(x264|x265|h264|h265|hevc|avc|xvid)\b",
        r"\b(dts|dd5\.1|ac3|aac|flac|truehd|atmos)\b",
        r"\b(multi|french|vff|vfi|vostfr|truefrench|english)\b",
        r"\b(proper|repack|internal|limited|extended|unrated|directors\.cut)\b",
        r"\[(.*?)\]",
        r"\{(.*?)\}",
        r"[-_.]",
    )
]
_space_re = re.compile(r"\s+")
_year_re = re.compile(r"\b(?:19|20)\d{2}\b")

_ID_PREFIXES = ("id:", "tmdb:")
MAX_WORDS = 4


def _strip_extension(filename: str) -> str:
    stem, dot, ext = filename.rpartition(".")
    return stem if dot and stem else filename


def extract_keywords(filename: str) -> str:
    """
    Turn a release-ish filename into a short search query.

      "The.Matrix.1999.1080p.BluRay.x264-GRP.mkv" -> "the matrix"

    Scene tags, bracketed groups and separators are blanked, the query is cut
    just before the first 19xx/20xx year found in the original name, and at
    most four words are kept.
    """
    name = _strip_extension(filename)

    result = name.lower()
    for pat in _SCENE_PATTERNS:
        result = pat.sub(" ", result)
    result = _space_re.sub(" ", result).strip()

    # Index is taken on the original name; blanking keeps lengths mostly aligned.
    m = _year_re.search(name)
    if m and m.start() > 0:
        result = result[: min(m.start(), len(result))].strip()

    return " ".join(result.split()[:MAX_WORDS])


def parse_direct_id(text: str | None) -> Optional[int]:
    """
    Accept 'id:123', 'tmdb:123' or a bare positive number. Returns None otherwise.
    """
    value = (text or "").strip().lower()
    for prefix in _ID_PREFIXES:
        if value.startswith(prefix):
            rest = value[len(prefix):].strip()
            if rest.isdigit():
                return int(rest)
    if value.isdigit() and int(value) > 0:
        return int(value)
    return None
