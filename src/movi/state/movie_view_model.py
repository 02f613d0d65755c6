"""
Movie View Model - owns the movie screen state and the two load operations.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable

from movi.repositories.movie_repository import MovieRepository
from movi.state.view_state import (
    MOVIE_DETAILS_RESOURCE,
    MOVIES_RESOURCE,
    MovieViewState,
    details_cleared,
    details_loaded,
    load_failed,
    loading_finished,
    loading_started,
    movies_loaded,
)
from movi.utils.get_logger import get_logger

logger = get_logger(__name__)

StateListener = Callable[[MovieViewState], None]


class MovieViewModel:
    """
    Holds the current MovieViewState for one screen session.

    Loads are not sequenced: if two overlap, whichever settles last
    writes the final movies/movie_details.
    """

    def __init__(self, repository: MovieRepository | None = None, api_key: str | None = None):
        self.repository = repository or MovieRepository()
        self.api_key = api_key
        self._state = MovieViewState()
        self._listeners: list[StateListener] = []
        self._tasks: set[asyncio.Task] = set()

    @property
    def state(self) -> MovieViewState:
        return self._state

    def add_listener(self, listener: StateListener) -> None:
        """Call listener with every new state."""
        self._listeners.append(listener)

    def remove_listener(self, listener: StateListener) -> None:
        self._listeners.remove(listener)

    def _set_state(self, state: MovieViewState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)

    async def fetch_popular_movies(self) -> None:
        self._set_state(loading_started(self._state))
        try:
            movies = await self.repository.get_popular_movies(self.api_key)
            self._set_state(movies_loaded(self._state, movies))
            logger.info(f"Loaded {len(movies)} popular movies")
        except Exception as e:
            logger.warning(f"Popular movies load failed: {type(e).__name__}: {e}")
            self._set_state(load_failed(self._state, MOVIES_RESOURCE, e))
        finally:
            self._set_state(loading_finished(self._state))

    async def fetch_movie_details(self, movie_id: int) -> None:
        self._set_state(loading_started(self._state, clear_details=True))
        try:
            movie = await self.repository.get_movie_details(movie_id, self.api_key)
            self._set_state(details_loaded(self._state, movie))
        except Exception as e:
            logger.warning(f"Details load failed for movie {movie_id}: {type(e).__name__}: {e}")
            self._set_state(load_failed(self._state, MOVIE_DETAILS_RESOURCE, e))
        finally:
            self._set_state(loading_finished(self._state))

    def clear_movie_details(self) -> None:
        self._set_state(details_cleared(self._state))

    def _launch(self, coro) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(coro)
        # keep a reference until done so the task is not garbage collected
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def launch_popular_movies(self) -> asyncio.Task:
        """Fire-and-forget popular movies load. Needs a running event loop."""
        return self._launch(self.fetch_popular_movies())

    def launch_movie_details(self, movie_id: int) -> asyncio.Task:
        """Fire-and-forget details load. Needs a running event loop."""
        return self._launch(self.fetch_movie_details(movie_id))

    async def wait_idle(self) -> None:
        """Wait for every launched load to settle."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))
