"""
TMDB Models - Pydantic models for TMDB data structures
Raw shapes returned by the popular and movie details endpoints.
"""

from __future__ import annotations

from movi.utils.pydantic_tools import BaseModelWithMethods

POSTER_BASE_URL = "https://image.tmdb.org/t/p/w500"


class TMDBMovie(BaseModelWithMethods):
    """A movie as returned by both /movie/popular results and /movie/{id}.

    Only id and title are required; unknown fields are ignored.
    """

    id: int
    title: str
    overview: str = ""
    poster_path: str | None = None
    vote_average: float = 0.0
    release_date: str = ""

    @property
    def full_poster_url(self) -> str | None:
        if self.poster_path is None:
            return None
        return f"{POSTER_BASE_URL}{self.poster_path}"


class TMDBPopularMoviesResponse(BaseModelWithMethods):
    """Envelope of GET /movie/popular."""

    results: list[TMDBMovie]
    page: int = 1
    total_pages: int | None = None
    total_results: int | None = None

    @property
    def movies(self) -> list[TMDBMovie]:
        return self.results

