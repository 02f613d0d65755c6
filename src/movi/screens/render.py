"""
Text renderers for the movie list and movie details screens.
Each takes a MovieViewState and returns the screen as a string.
"""

from movi.api.tmdb.tmdb_models import TMDBMovie
from movi.state.view_state import MovieViewState

PLACEHOLDER_IMAGE_URL = "https://placehold.co/500x750/000000/FFFFFF?text=No+Image"
LIST_TITLE = "Popular Movies"
DETAILS_TITLE = "Details"
LOADING_TEXT = "Loading..."


def poster_url(movie: TMDBMovie) -> str:
    return movie.full_poster_url or PLACEHOLDER_IMAGE_URL


def _top_bar(title: str, back: bool = False) -> list[str]:
    label = f"< {title}" if back else title
    return [label, "=" * len(label)]


def render_movie_item(movie: TMDBMovie) -> str:
    return f"[{movie.id}] {movie.title}  ({poster_url(movie)})"


def render_movie_list(state: MovieViewState) -> str:
    lines = _top_bar(LIST_TITLE)
    # the spinner only replaces the grid while there is nothing to show yet
    if state.is_loading and not state.movies:
        lines.append(LOADING_TEXT)
    elif state.error_message is not None:
        lines.append(state.error_message)
    else:
        lines.extend(render_movie_item(movie) for movie in state.movies)
    return "\n".join(lines)


def render_movie_details(state: MovieViewState) -> str:
    movie = state.movie_details
    lines = _top_bar(movie.title if movie else DETAILS_TITLE, back=True)
    if state.is_loading:
        lines.append(LOADING_TEXT)
    elif state.error_message is not None:
        lines.append(state.error_message)
    elif movie is not None:
        lines.extend(
            [
                poster_url(movie),
                "",
                movie.title,
                f"* {movie.vote_average:.1f}/10    Release: {movie.release_date}",
                "",
                "Overview",
                movie.overview,
            ]
        )
    return "\n".join(lines)
