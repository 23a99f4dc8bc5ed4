# releasekit/services/movies/payload_lookup.py
from __future__ import annotations

from typing import Any, Callable, Iterable, List, Mapping

from releasekit.common.logging import get_logger
from releasekit.domain.entities.movie import Movie
from releasekit.domain.ports.movies import MovieLookupPort
from releasekit.services.mappers.movie import movie_from_payload

logger = get_logger(__name__)

Payload = Mapping[str, Any]


class PayloadMovieLookup(MovieLookupPort):
    """
    MovieLookupPort over a client that speaks raw JSON-like payloads
    (a TMDB API wrapper, a scraper). Every payload goes through
    movie_from_payload, so clients never build Movie themselves.
    """

    def __init__(
        self,
        search_fn: Callable[[str], Iterable[Payload]],
        details_fn: Callable[[int], Payload],
    ) -> None:
        self._search = search_fn
        self._details = details_fn

    def search(self, keywords: str) -> List[Movie]:
        movies = [movie_from_payload(p) for p in self._search(keywords) or []]
        logger.debug("search %r mapped %d payload(s)", keywords, len(movies))
        return movies

    def details(self, movie_id: int) -> Movie:
        return movie_from_payload(self._details(movie_id))
