from movi.api.tmdb.core import TMDBService
from movi.api.tmdb.tmdb_models import TMDBMovie


class MovieRepository:
    def __init__(self, service: TMDBService | None = None):
        self.service = service or TMDBService()

    async def get_popular_movies(self, api_key: str | None = None) -> list[TMDBMovie]:
        """Popular movies in server order, unwrapped from the results envelope."""
        response = await self.service.list_popular(api_key)
        return response.results

    async def get_movie_details(self, movie_id: int, api_key: str | None = None) -> TMDBMovie:
        return await self.service.get_detail(movie_id, api_key)
