from typing import Dict, List, Mapping, Sequence, Tuple

from injector import inject
from structlog.stdlib import BoundLogger

from domain.entities import GenreScore
from domain.interfaces import IScoreAggregator
from utils.genres import GENRES

SUPPORTED_SCALES = (5, 7, 10)
TOP_GENRE_LIMIT = 7
TOP_GENRE_RATIO = 0.7


def clamp_rating(value: float, scale_size: int) -> float:
    if value is None:
        return 0
    return min(max(value, 0), scale_size)


def sort_by_average(scores: Dict[str, GenreScore]) -> List[Tuple[str, GenreScore]]:
    """Highest average first. ``sorted`` is stable, so ties keep genre declaration order."""
    return sorted(scores.items(), key=lambda item: item[1].average, reverse=True)


class ScoreAggregatorService(IScoreAggregator):
    @inject
    def __init__(self, logger: BoundLogger):
        self.logger = logger
        self.genres = GENRES

    def aggregate(
        self,
        voter_count: int,
        ratings: Mapping[int, Mapping[str, float]],
        scale_size: int,
    ) -> Dict[str, GenreScore]:
        if voter_count < 0:
            raise ValueError("voter_count must not be negative")
        if scale_size not in SUPPORTED_SCALES:
            raise ValueError(f"scale_size must be one of {SUPPORTED_SCALES}")

        unknown = {
            genre
            for voter_ratings in ratings.values()
            for genre in voter_ratings
            if genre not in self.genres
        }
        if unknown:
            self.logger.warning("Ignoring ratings for unknown genres", genres=sorted(unknown))

        aggregated: Dict[str, GenreScore] = {}
        for genre in self.genres:
            per_voter = [
                clamp_rating(ratings.get(voter, {}).get(genre, 0), scale_size)
                for voter in range(voter_count)
            ]
            total = sum(per_voter)
            average = total / voter_count if voter_count > 0 else 0
            aggregated[genre] = GenreScore(scores=per_voter, total=total, average=average)
        return aggregated

    def aggregate_voters(
        self, voters: Sequence[Mapping[str, float]], scale_size: int
    ) -> Dict[str, GenreScore]:
        """Aggregate an ordered list of per-voter rating maps."""
        return self.aggregate(len(voters), dict(enumerate(voters)), scale_size)

    def top_genres(
        self, scores: Dict[str, GenreScore], scale_size: int
    ) -> List[Tuple[str, GenreScore]]:
        threshold = scale_size * TOP_GENRE_RATIO
        ranked = sort_by_average(scores)[:TOP_GENRE_LIMIT]
        top = [(genre, score) for genre, score in ranked if score.average >= threshold]
        self.logger.info(
            "Top genres selected",
            threshold=round(threshold, 2),
            top_genres=[genre for genre, _ in top],
        )
        return top
