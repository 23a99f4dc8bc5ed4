# releasekit/services/schemas/movie.py
from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _name_or_str(v: Any) -> str:
    if isinstance(v, dict):
        return str(v.get("name") or "")
    return "" if v is None else str(v)


class CastMemberIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    character: str = ""
    order: int = 0
    profile_path: str = ""

    @field_validator("name", "character", "profile_path", mode="before")
    @classmethod
    def _none_as_empty(cls, v):
        return "" if v is None else v


class CrewMemberIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    job: str = ""


class CreditsIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    cast: List[CastMemberIn] = Field(default_factory=list)
    crew: List[CrewMemberIn] = Field(default_factory=list)


class MovieIn(BaseModel):
    """
    Movie payload as a lookup client hands it over: TMDB-API-like JSON or the
    equivalent dict built by a scraper. Nulls become empty values.
    """
    model_config = ConfigDict(extra="ignore")

    id: int = 0
    title: str = ""
    original_title: str = ""
    overview: str = ""
    release_date: str = ""
    poster_path: str = ""
    backdrop_path: str = ""
    vote_average: float = Field(0.0, ge=0)
    vote_count: int = Field(0, ge=0)
    runtime: int = Field(0, ge=0)
    tagline: str = ""
    imdb_id: str = ""
    genres: List[str] = Field(default_factory=list)
    directors: List[str] = Field(default_factory=list)
    cast: List[CastMemberIn] = Field(default_factory=list)
    credits: Optional[CreditsIn] = None

    @field_validator(
        "title", "original_title", "overview", "release_date", "poster_path",
        "backdrop_path", "tagline", "imdb_id", mode="before",
    )
    @classmethod
    def _none_as_empty(cls, v):
        return "" if v is None else v

    @field_validator("vote_average", "vote_count", "runtime", "id", mode="before")
    @classmethod
    def _none_as_zero(cls, v):
        return 0 if v is None else v

    @field_validator("genres", "directors", mode="before")
    @classmethod
    def _names(cls, v):
        return [n for n in (_name_or_str(x) for x in (v or [])) if n]

    @field_validator("cast", mode="before")
    @classmethod
    def _cast_list(cls, v):
        return v or []
