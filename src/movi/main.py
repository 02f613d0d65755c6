#!/usr/bin/env python3
"""CLI: show the popular movies list, or one movie's details, from TMDB."""

from __future__ import annotations

import argparse
import asyncio
import json
import os
import sys

from movi.adapters.config import load_env
from movi.screens.movie_app import MovieApp
from movi.state.movie_view_model import MovieViewModel


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="movi",
        description="Show TMDB popular movies, or the details of one movie.",
        usage="%(prog)s [movie_id] [--json] [--api-key KEY]",
    )
    parser.add_argument("movie_id", type=int, nargs="?", help="TMDB movie id for the details screen.")
    parser.add_argument("--json", action="store_true", help="Print the screen state as JSON.")
    parser.add_argument("--api-key", default=None, help="TMDB v3 API key (default: $TMDB_API_KEY).")
    parser.add_argument("--indent", type=int, default=2, help="JSON indent (default: 2).")
    return parser.parse_args(argv)


async def run(args: argparse.Namespace) -> int:
    view_model = MovieViewModel(api_key=args.api_key)
    app = MovieApp(view_model)

    if args.movie_id is None:
        view_model.launch_popular_movies()
    else:
        app.on_movie_click(args.movie_id)
    await view_model.wait_idle()

    state = view_model.state
    if args.json:
        print(json.dumps(state.model_dump(mode="json"), indent=args.indent, ensure_ascii=False))
    else:
        print(app.render())

    if state.error_message:
        print(state.error_message, file=sys.stderr)
        return 2
    return 0


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    load_env()

    if not (args.api_key or os.getenv("TMDB_API_KEY")):
        print(
            "TMDB_API_KEY is not set. Source config/local.env, export it, or pass --api-key.",
            file=sys.stderr,
        )
        sys.exit(1)

    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
