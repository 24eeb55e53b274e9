from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from .entities import GenreCombinationQuery, GenreCombinationResult, GenreScore, Movie


class IScoreAggregator(ABC):
    @abstractmethod
    def aggregate(
        self,
        voter_count: int,
        ratings: Mapping[int, Mapping[str, float]],
        scale_size: int,
    ) -> Dict[str, GenreScore]:
        pass

    @abstractmethod
    def top_genres(
        self, scores: Dict[str, GenreScore], scale_size: int
    ) -> List[Tuple[str, GenreScore]]:
        pass


class IGenreQueryPlanner(ABC):
    @abstractmethod
    def plan(self, scores: Dict[str, GenreScore]) -> List[GenreCombinationQuery]:
        pass


class IKeyValueStore(ABC):
    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        pass

    @abstractmethod
    def keys(self, prefix: str = "") -> Iterable[str]:
        pass


class ICacheRepository(ABC):
    @abstractmethod
    def get(self, key: str) -> Any:
        pass

    @abstractmethod
    def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        pass

    @abstractmethod
    def clear_all(self) -> None:
        pass

    @abstractmethod
    def clear_expired(self) -> None:
        pass

    @abstractmethod
    def create_genre_key(self, genre_ids: List[int], require_all: bool = False) -> str:
        pass


class IMovieApiService(ABC):
    @property
    @abstractmethod
    def is_configured(self) -> bool:
        pass

    @abstractmethod
    async def get_movies_by_genre_combination(
        self, genre_ids: List[int], require_all: bool = False, limit: int = 10
    ) -> GenreCombinationResult:
        pass

    @abstractmethod
    async def get_movie_details(self, movie_id: int) -> Movie:
        pass

    @abstractmethod
    async def search_movies(self, query: str, page: int = 1) -> List[Movie]:
        pass

    @abstractmethod
    async def aclose(self) -> None:
        pass


class IFallbackService(ABC):
    @abstractmethod
    def recommend(self, scores: Dict[str, GenreScore]) -> Dict[str, List[Movie]]:
        pass
