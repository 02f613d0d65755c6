"""
TMDB Auth Service - Base service with authentication utilities.
Provides foundation for TMDB API operations.
"""

import os

from movi.utils.get_logger import get_logger

logger = get_logger(__name__)

DEFAULT_BASE_URL = "https://api.themoviedb.org/3"


class Auth:
    """
    Base TMDB service with authentication utilities.
    The v3 API key travels as the api_key query parameter.
    """

    _tmdb_api_key: str | None = None
    base_url: str | None = None

    def __init__(self, api_key: str | None = None, base_url: str | None = None):
        self.base_url = (base_url or os.getenv("TMDB_BASE_URL") or DEFAULT_BASE_URL).rstrip("/")
        # Initialize private attribute for lazy-loading property
        self._tmdb_api_key = api_key

    @property
    def tmdb_api_key(self) -> str | None:
        """Lazy-load TMDB API key from the environment."""
        if self._tmdb_api_key is None:
            self._tmdb_api_key = os.getenv("TMDB_API_KEY")
            if self._tmdb_api_key:
                logger.info("Loaded TMDB API key via env var")
            else:
                logger.error("TMDB_API_KEY not available in environment")
        return self._tmdb_api_key

    def auth_params(self, api_key: str | None = None) -> dict[str, str]:
        """Return the query parameters that authenticate a TMDB request."""
        return {"api_key": api_key or self.tmdb_api_key or ""}
