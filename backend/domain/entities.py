from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class Movie:
    title: str
    year: int
    rating_value: float
    description: str
    poster_url: Optional[str] = None
    external_id: Optional[int] = None
    runtime_minutes: Optional[int] = None
    genres: Optional[List[str]] = None
    vote_count: Optional[int] = None
    popularity: Optional[float] = None
    imdb_id: Optional[str] = None


@dataclass
class GenreScore:
    scores: List[float]
    total: float
    average: float


@dataclass
class GenreCombinationQuery:
    genres: List[str]
    require_all: bool
    min_score: float


@dataclass
class GenreCombinationResult:
    category: str
    movies: List[Movie] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GenreCombinationResult":
        return cls(
            category=data["category"],
            movies=[Movie(**m) for m in data.get("movies", [])],
        )


@dataclass
class CacheEntry:
    data: Any
    created_at: int
    ttl: int

    def is_expired(self, now: int) -> bool:
        return now - self.created_at > self.ttl


@dataclass
class SavedMovie:
    movie: Movie
    category: str

    @property
    def key(self) -> str:
        # Two distinct movies sharing a title inside one category collide here.
        return make_saved_key(self.category, self.movie.title)


def make_saved_key(category: str, title: str) -> str:
    return f"{category}-{title}"
