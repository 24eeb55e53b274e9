import re
from dataclasses import dataclass
from typing import Dict, List

from injector import inject
from structlog.stdlib import BoundLogger

from domain.entities import GenreScore, Movie, SavedMovie, make_saved_key

CATEGORY_SEPARATOR = re.compile(r"[/,]")


@dataclass
class RankedSelection:
    saved: SavedMovie
    genre_scores: Dict[str, float]
    match_score: float
    match_out_of_ten: float


class SavedMoviesService:
    """The "save for later" set, keyed by ``category-title``."""

    @inject
    def __init__(self, logger: BoundLogger):
        self.logger = logger
        self._saved: Dict[str, SavedMovie] = {}

    def toggle(self, category: str, movie: Movie) -> bool:
        """Save the movie, or unsave it if already saved. Returns the new saved state."""
        key = make_saved_key(category, movie.title)
        if key in self._saved:
            del self._saved[key]
            self.logger.info("Movie unsaved", key=key)
            return False
        self._saved[key] = SavedMovie(movie=movie, category=category)
        self.logger.info("Movie saved", key=key)
        return True

    def is_saved(self, category: str, movie: Movie) -> bool:
        return make_saved_key(category, movie.title) in self._saved

    def saved(self) -> List[SavedMovie]:
        return list(self._saved.values())

    def clear(self) -> None:
        self._saved.clear()

    def final_selection(self, scores: Dict[str, GenreScore], scale_size: int) -> List[RankedSelection]:
        ranked = []
        for saved in self._saved.values():
            names = [name.strip() for name in CATEGORY_SEPARATOR.split(saved.category) if name.strip()]
            genre_scores = {name: scores[name].average if name in scores else 0 for name in names}
            match = sum(genre_scores.values()) / len(genre_scores) if genre_scores else 0
            ranked.append(
                RankedSelection(
                    saved=saved,
                    genre_scores=genre_scores,
                    match_score=match,
                    match_out_of_ten=round(match / scale_size * 10, 1),
                )
            )
        ranked.sort(key=lambda r: r.match_score, reverse=True)
        return ranked
