from movi.state.movie_view_model import MovieViewModel
from movi.state.view_state import MovieViewState

__all__ = ["MovieViewModel", "MovieViewState"]
