from typing import Optional

import structlog
from injector import Binder, Injector, Module, provider, singleton
from structlog.stdlib import BoundLogger

from core.settings import Settings, settings as default_settings
from domain.interfaces import (
    ICacheRepository,
    IFallbackService,
    IGenreQueryPlanner,
    IKeyValueStore,
    IMovieApiService,
    IScoreAggregator,
)
from managers.recommendation_resolver import RecommendationResolver
from repositories.cache import ExpiringCacheRepository
from repositories.kv_store import InMemoryKeyValueStore, RedisKeyValueStore
from services.fallback_service import FallbackRecommendationService
from services.query_planner import GenreQueryPlannerService
from services.saved_movies_service import SavedMoviesService
from services.score_aggregator import ScoreAggregatorService
from services.tmdb_service import TMDBApiService


class CineVoteModule(Module):
    def __init__(self, settings: Settings):
        self.settings = settings

    def configure(self, binder: Binder) -> None:
        binder.bind(Settings, to=self.settings, scope=singleton)
        binder.bind(BoundLogger, to=structlog.get_logger("cinevote"), scope=singleton)
        binder.bind(IScoreAggregator, to=ScoreAggregatorService, scope=singleton)
        binder.bind(IGenreQueryPlanner, to=GenreQueryPlannerService, scope=singleton)
        binder.bind(IFallbackService, to=FallbackRecommendationService, scope=singleton)
        binder.bind(SavedMoviesService, scope=singleton)
        binder.bind(RecommendationResolver, scope=singleton)

    @singleton
    @provider
    def provide_key_value_store(self, settings: Settings) -> IKeyValueStore:
        if settings.cache_backend == "redis":
            if not settings.redis_url:
                raise ValueError("REDIS_URL is required when CACHE_BACKEND=redis")
            return RedisKeyValueStore(settings.redis_url)
        return InMemoryKeyValueStore(capacity_bytes=settings.cache_capacity_bytes)

    @singleton
    @provider
    def provide_cache(self, store: IKeyValueStore, logger: BoundLogger) -> ICacheRepository:
        return ExpiringCacheRepository(store=store, logger=logger)

    @singleton
    @provider
    def provide_movie_api(self, settings: Settings, cache: ICacheRepository, logger: BoundLogger) -> IMovieApiService:
        return TMDBApiService(settings=settings, cache=cache, logger=logger)


def create_injector(settings: Optional[Settings] = None) -> Injector:
    return Injector([CineVoteModule(settings or default_settings)])
