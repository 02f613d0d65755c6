"""
Shared fixtures and utilities for TMDB service tests.

Fixtures are JSON payloads captured from the TMDB popular and movie
details endpoints, stored under fixtures/.
"""

import json
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(filename: str) -> dict:
    """Load a fixture from JSON file.

    Args:
        filename: Path of the fixture file relative to fixtures/

    Returns:
        Parsed JSON data

    Raises:
        FileNotFoundError: If fixture file doesn't exist
    """
    fixture_path = FIXTURES_DIR / filename
    if not fixture_path.exists():
        raise FileNotFoundError(f"Fixture file not found: {fixture_path}")

    with open(fixture_path) as f:
        return json.load(f)


def mock_client_session(status: int = 200, json_data=None, json_side_effect=None) -> MagicMock:
    """Build a MagicMock standing in for aiohttp.ClientSession().

    Usage: patch("aiohttp.ClientSession", return_value=mock_client_session(...))
    """
    mock_response = AsyncMock()
    mock_response.status = status
    mock_response.json = AsyncMock(return_value=json_data, side_effect=json_side_effect)

    mock_session = MagicMock()
    mock_session.get.return_value.__aenter__.return_value = mock_response
    mock_session.__aenter__.return_value = mock_session
    # a truthy __aexit__ would swallow exceptions raised inside the block
    mock_session.__aexit__.return_value = None
    return mock_session


@pytest.fixture
def mock_tmdb_api_key():
    """Mock TMDB API key."""
    return "test_tmdb_key_12345"


@pytest.fixture
def popular_movies_payload():
    return load_fixture("make_requests/get_popular_movies.json")


@pytest.fixture
def movie_details_payload():
    return load_fixture("make_requests/get_movie_details.json")
