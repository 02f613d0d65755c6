"""Unit tests for env file loading."""

import os

import pytest

from movi.adapters.config import load_env

pytestmark = pytest.mark.unit


def test_load_env_reads_env_file(tmp_path, monkeypatch):
    env_file = tmp_path / "local.env"
    env_file.write_text("TMDB_API_KEY=from_file\n")
    monkeypatch.setenv("ENV_FILE", str(env_file))
    monkeypatch.delenv("TMDB_API_KEY", raising=False)

    assert load_env() is True
    assert os.environ["TMDB_API_KEY"] == "from_file"
    monkeypatch.delenv("TMDB_API_KEY")


def test_existing_environment_wins(tmp_path, monkeypatch):
    env_file = tmp_path / "local.env"
    env_file.write_text("TMDB_API_KEY=from_file\n")
    monkeypatch.setenv("ENV_FILE", str(env_file))
    monkeypatch.setenv("TMDB_API_KEY", "exported")

    load_env()

    assert os.environ["TMDB_API_KEY"] == "exported"


def test_missing_env_file_is_not_an_error(tmp_path, monkeypatch):
    monkeypatch.setenv("ENV_FILE", str(tmp_path / "missing.env"))
    assert load_env() is False
