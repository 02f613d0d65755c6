"""
Movie screen state and its transitions.

MovieViewState is immutable; every transition returns a new instance.
MovieViewModel is the only caller that chains them.
"""

from __future__ import annotations

from pydantic import ConfigDict, Field

from movi.api.tmdb.tmdb_models import TMDBMovie
from movi.utils.pydantic_tools import BaseModelWithMethods

MOVIES_RESOURCE = "movies"
MOVIE_DETAILS_RESOURCE = "movie details"


class MovieViewState(BaseModelWithMethods):
    """What the list and details screens render."""

    model_config = ConfigDict(frozen=True)

    movies: list[TMDBMovie] = Field(default_factory=list)
    movie_details: TMDBMovie | None = None
    is_loading: bool = False
    error_message: str | None = None


def error_text(resource: str, exc: BaseException) -> str:
    message = str(exc) or type(exc).__name__
    return f"Failed to load {resource}: {message}"


def loading_started(state: MovieViewState, clear_details: bool = False) -> MovieViewState:
    update: dict = {"is_loading": True, "error_message": None}
    if clear_details:
        # stale details must not show under the new spinner
        update["movie_details"] = None
    return state.model_copy(update=update)


def movies_loaded(state: MovieViewState, movies: list[TMDBMovie]) -> MovieViewState:
    return state.model_copy(update={"movies": list(movies)})


def details_loaded(state: MovieViewState, movie: TMDBMovie) -> MovieViewState:
    return state.model_copy(update={"movie_details": movie})


def load_failed(state: MovieViewState, resource: str, exc: BaseException) -> MovieViewState:
    """Record the failure; movies and movie_details stay as they were."""
    return state.model_copy(update={"error_message": error_text(resource, exc)})


def loading_finished(state: MovieViewState) -> MovieViewState:
    return state.model_copy(update={"is_loading": False})


def details_cleared(state: MovieViewState) -> MovieViewState:
    return state.model_copy(update={"movie_details": None})
