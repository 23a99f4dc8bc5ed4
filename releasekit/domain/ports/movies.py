from __future__ import annotations
from typing import List, Protocol
from releasekit.domain.entities.movie import Movie

class MovieLookupPort(Protocol):
    """
    Movie database collaborator (scraper or API client).
    Clients returning raw payloads plug in through
    services.movies.payload_lookup.PayloadMovieLookup, which maps them with
    services.mappers.movie.movie_from_payload.
    """
    def search(self, keywords: str) -> List[Movie]: ...
    def details(self, movie_id: int) -> Movie: ...
