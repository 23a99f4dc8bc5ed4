from __future__ import annotations
from typing import Optional, Protocol, Sequence
from releasekit.domain.entities.movie import Movie

class PrompterPort(Protocol):
    """User-interaction seam: console menus, a web form, or canned answers in tests."""
    def select_movie(self, movies: Sequence[Movie]) -> Optional[Movie]: ...
    def select_source_type(self) -> str: ...
    def ask_for_input(self, prompt: str) -> str: ...
