from typing import List, Literal, Optional

from pydantic import BaseModel


class MovieItem(BaseModel):
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


class RecommendationCategory(BaseModel):
    category: str
    movies: List[MovieItem]


class TopGenre(BaseModel):
    genre: str
    average: float


class RecommendationResponse(BaseModel):
    categories: List[RecommendationCategory]
    top_genres: List[TopGenre]
    source: Literal["catalog", "fallback"]
    notice: Optional[str] = None

    def as_mapping(self) -> dict:
        return {c.category: c.movies for c in self.categories}
