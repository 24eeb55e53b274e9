from copy import deepcopy
from typing import Callable, Dict, List, NamedTuple, Tuple

from injector import inject
from structlog.stdlib import BoundLogger

from domain.entities import GenreScore, Movie
from domain.interfaces import IFallbackService
from services.score_aggregator import sort_by_average
from utils import fallback_catalog

MAX_CATEGORIES = 6
GENRE_THRESHOLD = 3
CROWD_FAVORITES_CATEGORY = "Crowd Favorites"


class CombinationRule(NamedTuple):
    category: str
    genres: Tuple[str, ...]
    matches: Callable[[Callable[[str], float]], bool]
    movies: List[Movie]


COMBINATION_RULES: Tuple[CombinationRule, ...] = (
    CombinationRule(
        "War/Drama",
        ("War", "Drama"),
        lambda avg: avg("War") >= 3 and avg("Drama") >= 3,
        fallback_catalog.WAR_DRAMA,
    ),
    CombinationRule(
        "Historical War/Drama",
        ("History",),
        lambda avg: avg("History") >= 3 and (avg("War") >= 3 or avg("Drama") >= 3),
        fallback_catalog.HISTORICAL_WAR_DRAMA,
    ),
    CombinationRule(
        "Crime/Drama/Mystery",
        ("Crime", "Drama"),
        lambda avg: avg("Crime") >= 3.5 and avg("Drama") >= 3.5,
        fallback_catalog.CRIME_DRAMA_MYSTERY,
    ),
)


class FallbackRecommendationService(IFallbackService):
    """Hand-curated recommendations used when the catalog cannot be queried."""

    @inject
    def __init__(self, logger: BoundLogger):
        self.logger = logger

    def recommend(self, scores: Dict[str, GenreScore]) -> Dict[str, List[Movie]]:
        def avg(genre: str) -> float:
            score = scores.get(genre)
            return score.average if score else 0

        recommendations: Dict[str, List[Movie]] = {}
        covered = set()
        for rule in COMBINATION_RULES:
            if rule.matches(avg):
                recommendations[rule.category] = deepcopy(rule.movies)
                covered.update(rule.genres)

        uncurated = False
        for genre, score in sort_by_average(scores):
            if score.average < GENRE_THRESHOLD:
                break
            if genre in covered:
                continue
            curated = fallback_catalog.SINGLE_GENRE.get(genre)
            if curated:
                recommendations[genre] = deepcopy(curated)
            else:
                uncurated = True

        if uncurated and CROWD_FAVORITES_CATEGORY not in recommendations:
            recommendations[CROWD_FAVORITES_CATEGORY] = deepcopy(fallback_catalog.CROWD_FAVORITES)

        limited = dict(list(recommendations.items())[:MAX_CATEGORIES])
        self.logger.info(
            "Fallback recommendations built",
            categories=list(limited),
            dropped=len(recommendations) - len(limited),
        )
        return limited
