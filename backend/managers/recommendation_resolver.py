import asyncio
from dataclasses import asdict
from typing import Dict, List, Optional

from injector import inject
from structlog.stdlib import BoundLogger

from domain.entities import GenreCombinationQuery, GenreCombinationResult, GenreScore, Movie
from domain.exceptions import CatalogError, ConfigurationMissingError
from domain.interfaces import (
    ICacheRepository,
    IFallbackService,
    IGenreQueryPlanner,
    IMovieApiService,
    IScoreAggregator,
)
from schemas.ratings import RatingsRequest
from schemas.recommendation import (
    MovieItem,
    RecommendationCategory,
    RecommendationResponse,
    TopGenre,
)
from utils.genres import get_genre_ids

MOVIES_PER_CATEGORY = 10
CATALOG_UNAVAILABLE_NOTICE = "Failed to fetch movie recommendations. Using cached/default recommendations."
CATALOG_UNCONFIGURED_NOTICE = "Movie catalog is not configured. Showing curated recommendations."


class RecommendationResolver:
    @inject
    def __init__(
        self,
        aggregator: IScoreAggregator,
        planner: IGenreQueryPlanner,
        cache: ICacheRepository,
        catalog: IMovieApiService,
        fallback: IFallbackService,
        logger: BoundLogger,
    ):
        self.aggregator = aggregator
        self.planner = planner
        self.cache = cache
        self.catalog = catalog
        self.fallback = fallback
        self.logger = logger

    async def resolve(self, request: RatingsRequest) -> RecommendationResponse:
        """Main entry point: turn the voters' genre ratings into recommendations."""
        self.logger.info(
            "Starting recommendation resolution",
            voter_count=len(request.voters),
            scale_size=request.scale_size,
        )
        scores = self.aggregator.aggregate(len(request.voters), request.ratings_by_index(), request.scale_size)
        top_genres = self.aggregator.top_genres(scores, request.scale_size)

        notice: Optional[str] = None
        source = "catalog"
        if not self.catalog.is_configured:
            self.logger.warning("TMDB API key not configured, using fallback recommendations")
            recommendations = self.fallback.recommend(scores)
            notice, source = CATALOG_UNCONFIGURED_NOTICE, "fallback"
        else:
            try:
                recommendations = await self._resolve_from_catalog(scores)
            except (CatalogError, ConfigurationMissingError) as e:
                self.logger.error("Error fetching recommendations, using fallback", error=str(e))
                recommendations = self.fallback.recommend(scores)
                notice, source = CATALOG_UNAVAILABLE_NOTICE, "fallback"

        self.logger.info(
            "Recommendation resolution completed",
            source=source,
            categories=list(recommendations),
            total_movies=sum(len(m) for m in recommendations.values()),
        )
        return RecommendationResponse(
            categories=[
                RecommendationCategory(category=category, movies=[MovieItem(**asdict(m)) for m in movies])
                for category, movies in recommendations.items()
            ],
            top_genres=[TopGenre(genre=genre, average=score.average) for genre, score in top_genres],
            source=source,
            notice=notice,
        )

    async def _resolve_from_catalog(self, scores: Dict[str, GenreScore]) -> Dict[str, List[Movie]]:
        queries = self.planner.plan(scores)
        tasks = [asyncio.ensure_future(self._resolve_query(q)) for q in queries]
        try:
            results = await asyncio.gather(*tasks)
        except BaseException:
            # first failure abandons the rest of the batch
            for task in tasks:
                task.cancel()
            raise

        recommendations: Dict[str, List[Movie]] = {}
        for result in results:
            if result and result.movies:
                recommendations[result.category] = result.movies
        return recommendations

    async def _resolve_query(self, query: GenreCombinationQuery) -> Optional[GenreCombinationResult]:
        genre_ids = get_genre_ids(query.genres)
        if not genre_ids:
            self.logger.info("Skipping query without catalog genres", genres=query.genres)
            return None

        cache_key = self.cache.create_genre_key(genre_ids, query.require_all)
        cached = self.cache.get(cache_key)
        if cached is not None:
            try:
                result = GenreCombinationResult.from_dict(cached)
            except (KeyError, TypeError) as e:
                self.logger.warning("Discarding malformed cache entry", cache_key=cache_key, error=str(e))
                self.cache.remove(cache_key)
            else:
                self.logger.info("Cache hit for genre query", cache_key=cache_key)
                return result

        self.logger.info("Cache miss for genre query", cache_key=cache_key)
        result = await self.catalog.get_movies_by_genre_combination(
            genre_ids, query.require_all, MOVIES_PER_CATEGORY
        )
        if result.movies:
            self.cache.set(cache_key, asdict(result))
        else:
            self.logger.info("Not caching empty genre query result", cache_key=cache_key)
        return result
