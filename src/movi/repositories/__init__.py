from movi.repositories.movie_repository import MovieRepository

__all__ = ["MovieRepository"]
