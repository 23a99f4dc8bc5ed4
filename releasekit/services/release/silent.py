# releasekit/services/release/silent.py
from __future__ import annotations

from typing import Optional, Sequence

from releasekit.domain.entities.movie import Movie
from releasekit.domain.enums.source_type import SourceType
from releasekit.domain.ports.prompter import PrompterPort


class SilentPrompter(PrompterPort):
    """
    Non-interactive prompter for automation: picks a configured result index
    (first by default), a fixed source type, and answers questions with a canned string.
    """

    def __init__(
        self,
        movie_index: int = 0,
        source_type: str = SourceType.web_dl,
        answer: str = "",
    ) -> None:
        self.movie_index = movie_index
        self.source_type = str(source_type)
        self.answer = answer

    def select_movie(self, movies: Sequence[Movie]) -> Optional[Movie]:
        if not movies:
            return None
        idx = self.movie_index if 0 <= self.movie_index < len(movies) else 0
        return movies[idx]

    def select_source_type(self) -> str:
        return self.source_type

    def ask_for_input(self, prompt: str) -> str:
        return self.answer
