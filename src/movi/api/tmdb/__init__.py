"""
TMDB Services - catalog client for the TMDB API.
"""

from movi.api.tmdb.core import TMDBService
from movi.api.tmdb.tmdb_models import POSTER_BASE_URL, TMDBMovie, TMDBPopularMoviesResponse

__all__ = [
    # Service
    "TMDBService",
    # Models
    "TMDBMovie",
    "TMDBPopularMoviesResponse",
    "POSTER_BASE_URL",
]
