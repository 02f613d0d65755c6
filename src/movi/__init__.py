"""movi - TMDB popular movies client."""

__version__ = "0.1.0"
