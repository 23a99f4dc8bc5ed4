# releasekit/domain/policies/languages.py
from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

FLAG_URL = "[img]https://flagcdn.com/20x15/{country}.png[/img]"
UNKNOWN_FLAG = FLAG_URL.format(country="un")

# code -> (display name, flag country)
_LANGUAGES: Dict[str, Tuple[str, str]] = {
    "fre": ("FR", "fr"), "fra": ("FR", "fr"), "fr": ("FR", "fr"),
    "eng": ("EN", "gb"), "en": ("EN", "gb"),
    "jpn": ("JP", "jp"), "ja": ("JP", "jp"),
    "ger": ("DE", "de"), "deu": ("DE", "de"), "de": ("DE", "de"),
    "spa": ("ES", "es"), "es": ("ES", "es"),
    "ita": ("IT", "it"), "it": ("IT", "it"),
    "por": ("PT", "pt"), "pt": ("PT", "pt"),
    "rus": ("RU", "ru"), "ru": ("RU", "ru"),
    "chi": ("ZH", "cn"), "zho": ("ZH", "cn"), "zh": ("ZH", "cn"),
    "kor": ("KO", "kr"), "ko": ("KO", "kr"),
    "ara": ("AR", "sa"), "ar": ("AR", "sa"),
}

# Release-name tokens. English is the implicit default and maps to "".
_RELEASE_NAMES: Dict[str, str] = {
    "fr": "FRENCH", "fre": "FRENCH", "fra": "FRENCH", "french": "FRENCH",
    "eng": "", "english": "",
    "ger": "GERMAN", "deu": "GERMAN", "german": "GERMAN",
    "spa": "SPANISH",
    "ita": "ITALIAN",
    "jpn": "JAPANESE",
    "kor": "KOREAN",
    "chi": "CHINESE", "zho": "CHINESE",
    "rus": "RUSSIAN",
    "por": "PORTUGUESE",
    "ara": "ARABIC",
}

FRENCH = "FRENCH"
MULTI = "MULTI"
VF = "VF"


def _lookup(code: str) -> Optional[Tuple[str, str]]:
    key = (code or "").lower()[:3]
    hit = _LANGUAGES.get(key)
    if hit is None and len(key) >= 2:
        hit = _LANGUAGES.get(key[:2])
    return hit


def language_flag(code: str) -> str:
    """BBCode flag image for an ISO-639 code (3-letter, then 2-letter, then 'unknown')."""
    hit = _lookup(code)
    return FLAG_URL.format(country=hit[1]) if hit else UNKNOWN_FLAG


def language_name(code: str) -> str:
    hit = _lookup(code)
    return hit[0] if hit else (code or "").upper()


def release_language(languages: Iterable[str]) -> str:
    """
    Collapse per-track audio languages into one release-name token.

    Precedence: French + English -> MULTI, French alone -> VF,
    otherwise the de-duplicated names joined by '.', otherwise ''.
    """
    names: List[str] = []
    has_french = False
    has_english = False

    for raw in languages:
        code = (raw or "").lower()
        mapped = _RELEASE_NAMES.get(code)
        if mapped is None:
            continue
        if mapped == FRENCH:
            has_french = True
        if code in ("eng", "english"):
            has_english = True
        if mapped and mapped not in names:
            names.append(mapped)

    if has_french and has_english:
        return MULTI
    if has_french:
        return VF
    return ".".join(names)
