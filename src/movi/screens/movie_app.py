from movi.screens.render import render_movie_details, render_movie_list
from movi.state.movie_view_model import MovieViewModel


class MovieApp:
    """List/details navigation on top of a MovieViewModel."""

    def __init__(self, view_model: MovieViewModel):
        self.view_model = view_model
        self.selected_movie_id: int | None = None

    def on_movie_click(self, movie_id: int):
        """Open the details screen and start loading the movie."""
        self.selected_movie_id = movie_id
        return self.view_model.launch_movie_details(movie_id)

    def on_back_click(self) -> None:
        self.selected_movie_id = None
        self.view_model.clear_movie_details()

    def render(self) -> str:
        if self.selected_movie_id is None:
            return render_movie_list(self.view_model.state)
        return render_movie_details(self.view_model.state)
