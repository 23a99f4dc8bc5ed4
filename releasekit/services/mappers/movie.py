# releasekit/services/mappers/movie.py
from __future__ import annotations

from typing import Any, List, Mapping

from releasekit.domain.entities.movie import CastMember, Movie
from releasekit.services.schemas.movie import CastMemberIn, MovieIn


def _to_cast(members: List[CastMemberIn]) -> List[CastMember]:
    ordered = sorted(members, key=lambda m: m.order)
    return [
        CastMember(name=m.name, character=m.character, order=m.order, profile_path=m.profile_path)
        for m in ordered
        if m.name
    ]


def movie_from_payload(payload: Mapping[str, Any]) -> Movie:
    """
    Validate a lookup payload and map it into the Movie entity.
    Directors and cast may come flat ("directors", "cast") or nested under
    "credits" (TMDB append_to_response style); flat values win when present.
    """
    m = MovieIn.model_validate(dict(payload or {}))

    directors = list(m.directors)
    cast = list(m.cast)
    if m.credits is not None:
        if not directors:
            directors = [c.name for c in m.credits.crew if c.job == "Director" and c.name]
        if not cast:
            cast = list(m.credits.cast)

    return Movie(
        id=m.id,
        title=m.title,
        original_title=m.original_title,
        overview=m.overview,
        release_date=m.release_date,
        poster_path=m.poster_path,
        backdrop_path=m.backdrop_path,
        vote_average=m.vote_average,
        vote_count=m.vote_count,
        runtime=m.runtime,
        tagline=m.tagline,
        imdb_id=m.imdb_id,
        genres=list(m.genres),
        directors=directors,
        cast=_to_cast(cast),
    )
