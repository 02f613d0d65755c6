"""
TMDB Core Service - Catalog client for the TMDB API.
Two operations: the popular movies page and a single movie's details.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import ValidationError

from movi.api.tmdb.auth import Auth
from movi.api.tmdb.tmdb_models import TMDBMovie, TMDBPopularMoviesResponse
from movi.contracts.errors import DecodeError
from movi.utils.base_api_client import BaseAPIClient
from movi.utils.get_logger import get_logger

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", TMDBMovie, TMDBPopularMoviesResponse)


class TMDBService(Auth, BaseAPIClient):
    """
    Core TMDB service for API communication.
    No caching, no retries: every call is exactly one GET.
    """

    async def _make_request(
        self, endpoint: str, api_key: str | None = None, params: dict[str, Any] | None = None
    ) -> Any:
        """Make async HTTP request to TMDB API.

        Args:
            endpoint: API endpoint (e.g., 'movie/123')
            api_key: TMDB v3 API key; falls back to the configured key
            params: Optional extra query parameters

        Returns:
            Decoded JSON response

        Raises:
            RemoteError: If the request fails (see movi.contracts.errors)
        """
        url = f"{self.base_url}/{endpoint}"
        query = {**self.auth_params(api_key), **(params or {})}
        return await self._core_async_request(url=url, params=query)

    @staticmethod
    def _decode(model: type[ModelT], data: Any, endpoint: str) -> ModelT:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.warning(f"Unexpected response shape from {endpoint}: {e.error_count()} errors")
            raise DecodeError(f"Unexpected response shape from {endpoint}: {e}") from e

    async def list_popular(self, api_key: str | None = None) -> TMDBPopularMoviesResponse:
        """Fetch the default page of popular movies.

        Args:
            api_key: TMDB v3 API key

        Returns:
            TMDBPopularMoviesResponse with results in server order
        """
        endpoint = "movie/popular"
        data = await self._make_request(endpoint, api_key=api_key)
        response = self._decode(TMDBPopularMoviesResponse, data, endpoint)
        logger.debug(f"Fetched {len(response.results)} popular movies")
        return response

    async def get_detail(self, movie_id: int, api_key: str | None = None) -> TMDBMovie:
        """Fetch a single movie by TMDB id.

        Args:
            movie_id: TMDB movie id
            api_key: TMDB v3 API key

        Returns:
            TMDBMovie

        Raises:
            NotFoundError: If TMDB has no movie with this id
        """
        endpoint = f"movie/{movie_id}"
        data = await self._make_request(endpoint, api_key=api_key)
        return self._decode(TMDBMovie, data, endpoint)
