# releasekit/domain/entities/movie.py
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List

TMDB_IMAGE_BASE = "https://image.tmdb.org/t/p/"
TMDB_MOVIE_BASE = "https://www.themoviedb.org/movie/"
IMDB_TITLE_BASE = "https://www.imdb.com/title/"

_YEAR_RE = re.compile(r"(?<!\d)(\d{4})(?!\d)")


@dataclass(frozen=True)
class CastMember:
    name: str = ""
    character: str = ""
    order: int = 0
    profile_path: str = ""


@dataclass
class Movie:
    """
    Movie metadata as returned by the lookup collaborator.
    `release_date` has no fixed format: ISO dates, localized strings such as
    "19/08/2009 (FR)", a bare year, or nothing at all.
    """
    id: int = 0
    title: str = ""
    original_title: str = ""
    overview: str = ""
    release_date: str = ""
    poster_path: str = ""
    backdrop_path: str = ""
    vote_average: float = 0.0
    vote_count: int = 0
    runtime: int = 0                     # minutes
    tagline: str = ""
    imdb_id: str = ""
    genres: List[str] = field(default_factory=list)
    directors: List[str] = field(default_factory=list)
    cast: List[CastMember] = field(default_factory=list)

    def year(self) -> str:
        """First standalone 4-digit run of the release date, or ''."""
        m = _YEAR_RE.search(self.release_date or "")
        return m.group(1) if m else ""

    def poster_url(self, size: str = "w500") -> str:
        if not self.poster_path:
            return ""
        return f"{TMDB_IMAGE_BASE}{size or 'w500'}{self.poster_path}"

    def backdrop_url(self, size: str = "w1280") -> str:
        if not self.backdrop_path:
            return ""
        return f"{TMDB_IMAGE_BASE}{size or 'w1280'}{self.backdrop_path}"

    def imdb_url(self) -> str:
        if not self.imdb_id:
            return ""
        return f"{IMDB_TITLE_BASE}{self.imdb_id}"

    def tmdb_url(self) -> str:
        return f"{TMDB_MOVIE_BASE}{self.id}"

    def display_title(self) -> str:
        return self.title or self.original_title
