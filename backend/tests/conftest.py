from typing import List
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from structlog.stdlib import BoundLogger

from core.settings import Settings
from domain.entities import GenreCombinationResult, Movie
from domain.interfaces import IMovieApiService
from managers.recommendation_resolver import RecommendationResolver
from repositories.cache import ExpiringCacheRepository
from repositories.kv_store import InMemoryKeyValueStore
from schemas.ratings import RatingsRequest
from services.fallback_service import FallbackRecommendationService
from services.query_planner import GenreQueryPlannerService
from services.score_aggregator import ScoreAggregatorService
from services.tmdb_service import TMDBApiService
from tests.factories import TMDB_BASE_URL, FakeClock


@pytest.fixture
def mock_logger() -> BoundLogger:
    """Create a mock logger for testing."""
    logger = MagicMock(spec=BoundLogger)
    logger.debug = MagicMock()
    logger.info = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    return logger


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def memory_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def cache(memory_store, mock_logger, clock) -> ExpiringCacheRepository:
    return ExpiringCacheRepository(store=memory_store, logger=mock_logger, clock=clock)


@pytest.fixture
def settings() -> Settings:
    return Settings(TMDB_API_KEY="test-key", TMDB_BASE_URL=TMDB_BASE_URL)


@pytest.fixture
def unconfigured_settings() -> Settings:
    return Settings(TMDB_API_KEY=None, TMDB_BASE_URL=TMDB_BASE_URL)


@pytest.fixture
def tmdb_factory(settings, cache, mock_logger):
    """Build a TMDBApiService whose HTTP traffic goes to an in-process handler."""

    def _build(handler, service_settings: Settings = None) -> TMDBApiService:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url=TMDB_BASE_URL)
        return TMDBApiService(
            settings=service_settings or settings,
            cache=cache,
            logger=mock_logger,
            client=client,
        )

    return _build


@pytest.fixture
def aggregator(mock_logger) -> ScoreAggregatorService:
    return ScoreAggregatorService(logger=mock_logger)


@pytest.fixture
def planner(mock_logger) -> GenreQueryPlannerService:
    return GenreQueryPlannerService(logger=mock_logger)


@pytest.fixture
def fallback(mock_logger) -> FallbackRecommendationService:
    return FallbackRecommendationService(logger=mock_logger)


@pytest.fixture
def sample_movies() -> List[Movie]:
    return [
        Movie(
            title="Saving Private Ryan",
            year=1998,
            rating_value=8.2,
            description="Soldiers search for a paratrooper.",
            external_id=857,
            genres=["Drama", "History", "War"],
            vote_count=16000,
        ),
        Movie(
            title="Come and See",
            year=1985,
            rating_value=8.3,
            description="A Belarusian boy witnesses the horrors of war.",
            external_id=25237,
            genres=["Drama", "War"],
            vote_count=1500,
        ),
    ]


@pytest.fixture
def mock_catalog(sample_movies) -> IMovieApiService:
    """Create a mock catalog that answers every genre query with the sample movies."""
    catalog = AsyncMock(spec=IMovieApiService)
    catalog.is_configured = True
    catalog.get_movies_by_genre_combination = AsyncMock(
        side_effect=lambda ids, require_all, limit: GenreCombinationResult(
            category="/".join(str(i) for i in ids), movies=list(sample_movies)
        )
    )
    return catalog


@pytest.fixture
def resolver(aggregator, planner, cache, mock_catalog, fallback, mock_logger) -> RecommendationResolver:
    return RecommendationResolver(
        aggregator=aggregator,
        planner=planner,
        cache=cache,
        catalog=mock_catalog,
        fallback=fallback,
        logger=mock_logger,
    )


@pytest.fixture
def war_drama_request() -> RatingsRequest:
    """Two voters on a five star scale who both like War and Drama."""
    return RatingsRequest(
        scale_size=5,
        voters=[
            {"voter_id": "alex", "ratings": {"War": 5, "Drama": 5}},
            {"voter_id": "sam", "ratings": {"War": 4, "Drama": 3}},
        ],
    )
