from movi.screens.movie_app import MovieApp
from movi.screens.render import (
    PLACEHOLDER_IMAGE_URL,
    poster_url,
    render_movie_details,
    render_movie_list,
)

__all__ = [
    "MovieApp",
    "PLACEHOLDER_IMAGE_URL",
    "poster_url",
    "render_movie_details",
    "render_movie_list",
]
