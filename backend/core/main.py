import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional

import orjson
import structlog
from dotenv import load_dotenv
from pydantic import ValidationError

from core.di import create_injector
from core.log_config import setup_logging
from core.settings import Settings
from domain.interfaces import IMovieApiService
from managers.recommendation_resolver import RecommendationResolver
from schemas.ratings import RatingsRequest
from schemas.recommendation import RecommendationResponse


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Recommend movies from several voters' genre ratings.")
    parser.add_argument("ratings", type=Path, help="JSON file with scale_size and per-voter genre ratings")
    parser.add_argument("--pretty", action="store_true", help="indent the JSON output")
    return parser.parse_args(argv)


async def run(request: RatingsRequest, settings: Settings) -> RecommendationResponse:
    injector = create_injector(settings)
    catalog = injector.get(IMovieApiService)
    try:
        return await injector.get(RecommendationResolver).resolve(request)
    finally:
        await catalog.aclose()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    load_dotenv()
    settings = Settings()
    setup_logging(settings)
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(ratings_file=str(args.ratings))

    try:
        request = RatingsRequest.model_validate(orjson.loads(args.ratings.read_bytes()))
    except (OSError, orjson.JSONDecodeError, ValidationError) as e:
        print(f"Invalid ratings file: {e}", file=sys.stderr)
        return 2

    response = asyncio.run(run(request, settings))
    option = orjson.OPT_INDENT_2 if args.pretty else 0
    sys.stdout.write(orjson.dumps(response.model_dump(), option=option).decode() + "\n")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
