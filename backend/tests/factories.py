from typing import Callable, Dict, Iterable, List, Optional

import httpx

from domain.entities import GenreScore
from domain.exceptions import CacheError
from domain.interfaces import IKeyValueStore
from utils.genres import GENRES

TMDB_BASE_URL = "https://api.themoviedb.org/3"

TMDB_GENRES = [
    {"id": 28, "name": "Action"},
    {"id": 18, "name": "Drama"},
    {"id": 80, "name": "Crime"},
    {"id": 36, "name": "History"},
    {"id": 878, "name": "Science Fiction"},
    {"id": 53, "name": "Thriller"},
    {"id": 10752, "name": "War"},
]


class FakeClock:
    """Millisecond clock the tests can move forward by hand."""

    def __init__(self, start: int = 1_700_000_000_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += int(seconds * 1000)


def make_scores(**averages: float) -> Dict[str, GenreScore]:
    """Scores for every known genre, zero unless given. Underscores stand in for dashes (``Sci_Fi``)."""
    named = {name.replace("_", "-"): value for name, value in averages.items()}
    return {
        genre: GenreScore(scores=[named.get(genre, 0)], total=named.get(genre, 0), average=named.get(genre, 0))
        for genre in GENRES
    }


def tmdb_record(movie_id: int, title: str, genre_ids: List[int], **extra) -> dict:
    record = {
        "id": movie_id,
        "title": title,
        "overview": f"Overview of {title}",
        "release_date": "2001-05-04",
        "vote_average": 8.1,
        "vote_count": 2500,
        "popularity": 42.5,
        "poster_path": f"/{movie_id}.jpg",
        "genre_ids": genre_ids,
    }
    record.update(extra)
    return record


def make_tmdb_handler(discover_results: List[dict], requests: List[httpx.Request] = None) -> Callable:
    """In-process TMDB: serves the genre list and a fixed discover page, 404 otherwise."""

    def handler(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)
        if request.url.path.endswith("/genre/movie/list"):
            return httpx.Response(200, json={"genres": TMDB_GENRES})
        if request.url.path.endswith("/discover/movie"):
            return httpx.Response(200, json={"page": 1, "results": discover_results})
        return httpx.Response(404, json={"status_message": "not found"})

    return handler


class UnavailableStore(IKeyValueStore):
    """Key-value store whose backend is down: every call raises ``CacheError``."""

    def __init__(self):
        self.calls: List[str] = []

    def _fail(self, operation: str):
        self.calls.append(operation)
        raise CacheError(f"{operation} failed: connection refused")

    def get(self, key: str) -> Optional[str]:
        self._fail("get")

    def set(self, key: str, value: str) -> None:
        self._fail("set")

    def remove(self, key: str) -> None:
        self._fail("remove")

    def keys(self, prefix: str = "") -> Iterable[str]:
        self._fail("keys")
