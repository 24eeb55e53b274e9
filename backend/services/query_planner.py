from typing import Dict, List

from injector import inject
from structlog.stdlib import BoundLogger

from domain.entities import GenreCombinationQuery, GenreScore
from domain.interfaces import IGenreQueryPlanner
from services.score_aggregator import sort_by_average

MAX_QUERIES = 6
MAX_SINGLE_GENRES = 5
COMBINATION_THRESHOLD = 3
CRIME_DRAMA_THRESHOLD = 3.5


class GenreQueryPlannerService(IGenreQueryPlanner):
    """Turns aggregated genre scores into prioritized catalog queries.

    Fixed pairings come first in a set order, then the strongest single genres
    that no pairing already covers. At most ``MAX_QUERIES`` are returned.
    """

    @inject
    def __init__(self, logger: BoundLogger):
        self.logger = logger

    def plan(self, scores: Dict[str, GenreScore]) -> List[GenreCombinationQuery]:
        def avg(genre: str) -> float:
            score = scores.get(genre)
            return score.average if score else 0

        queries: List[GenreCombinationQuery] = []

        if avg("War") >= COMBINATION_THRESHOLD and avg("Drama") >= COMBINATION_THRESHOLD:
            queries.append(GenreCombinationQuery(["War", "Drama"], True, COMBINATION_THRESHOLD))

        if avg("History") >= COMBINATION_THRESHOLD:
            if avg("War") >= COMBINATION_THRESHOLD:
                queries.append(GenreCombinationQuery(["History", "War"], False, COMBINATION_THRESHOLD))
            if avg("Drama") >= COMBINATION_THRESHOLD:
                queries.append(GenreCombinationQuery(["History", "Drama"], False, COMBINATION_THRESHOLD))

        if avg("Crime") >= CRIME_DRAMA_THRESHOLD and avg("Drama") >= CRIME_DRAMA_THRESHOLD:
            queries.append(GenreCombinationQuery(["Crime", "Drama"], False, CRIME_DRAMA_THRESHOLD))

        if avg("Sci-Fi") >= COMBINATION_THRESHOLD:
            if avg("Action") >= COMBINATION_THRESHOLD:
                queries.append(GenreCombinationQuery(["Sci-Fi", "Action"], False, COMBINATION_THRESHOLD))
            if avg("Thriller") >= COMBINATION_THRESHOLD:
                queries.append(GenreCombinationQuery(["Sci-Fi", "Thriller"], False, COMBINATION_THRESHOLD))

        strongest = [
            (genre, score)
            for genre, score in sort_by_average(scores)
            if score.average >= COMBINATION_THRESHOLD
        ][:MAX_SINGLE_GENRES]
        for genre, score in strongest:
            if not any(genre in query.genres for query in queries):
                queries.append(GenreCombinationQuery([genre], False, score.average))

        planned = queries[:MAX_QUERIES]
        self.logger.info(
            "Genre queries planned",
            candidate_count=len(queries),
            planned_count=len(planned),
            queries=["/".join(q.genres) for q in planned],
        )
        return planned
