import asyncio
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

import httpx
from structlog.stdlib import BoundLogger

from core.settings import Settings
from domain.entities import GenreCombinationResult, Movie
from domain.exceptions import CatalogError, ConfigurationMissingError
from domain.interfaces import ICacheRepository, IMovieApiService
from utils.genres import TMDB_ID_TO_GENRE_NAME, get_category_name

COMBINATION_MIN_RATING = 7.0
COMBINATION_MIN_VOTES = 1000
UNKNOWN_GENRE = "Unknown"
NO_DESCRIPTION = "No description available."


@dataclass
class DiscoverParams:
    genres: List[int] = field(default_factory=list)
    min_rating: float = 7.0
    min_vote_count: int = 500
    release_year_from: Optional[int] = None
    release_year_to: Optional[int] = None
    sort_by: str = "vote_average.desc"
    page: int = 1


class TMDBApiService(IMovieApiService):
    def __init__(
        self,
        settings: Settings,
        cache: ICacheRepository,
        logger: BoundLogger,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_key = settings.tmdb_api_key
        self.language = settings.tmdb_language
        self.region = settings.tmdb_region
        self.image_base_url = settings.tmdb_image_base_url.rstrip("/")
        self.cache = cache
        self.logger = logger
        self.client = client or httpx.AsyncClient(
            base_url=settings.tmdb_base_url, timeout=settings.tmdb_timeout_seconds
        )
        self.genre_map: Dict[int, str] = {}
        self._genres_loaded = False
        self._genre_lock = asyncio.Lock()

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def aclose(self) -> None:
        await self.client.aclose()

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        if not self.is_configured:
            raise ConfigurationMissingError("TMDB API key is not configured")
        query = {"api_key": self.api_key, "language": self.language}
        query.update({k: v for k, v in (params or {}).items() if v is not None})
        try:
            response = await self.client.get(path, params=query)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            self.logger.error("TMDB request failed", path=path, status_code=e.response.status_code)
            raise CatalogError(f"TMDB returned {e.response.status_code} for {path}") from e
        except httpx.HTTPError as e:
            self.logger.error("TMDB request failed", path=path, error=str(e))
            raise CatalogError(f"Failed to reach TMDB for {path}") from e
        except ValueError as e:
            self.logger.error("TMDB returned invalid JSON", path=path, error=str(e))
            raise CatalogError(f"Invalid JSON from TMDB for {path}") from e
        if not isinstance(payload, dict):
            raise CatalogError(f"Unexpected payload from TMDB for {path}")
        return payload

    async def load_genres(self) -> Dict[int, str]:
        """Fetch the genre id to name table. A failure is logged and retried on the next call."""
        async with self._genre_lock:
            if self._genres_loaded:
                return self.genre_map
            try:
                payload = await self._get("/genre/movie/list")
                self.genre_map = {int(g["id"]): g["name"] for g in payload.get("genres", [])}
                self._genres_loaded = True
                self.logger.info("Genre table loaded", genre_count=len(self.genre_map))
            except (CatalogError, KeyError, TypeError, ValueError) as e:
                self.logger.error("Failed to load genres", error=str(e))
            return self.genre_map

    def _build_poster_url(self, poster_path: Optional[str]) -> Optional[str]:
        if not poster_path:
            return None
        if poster_path.startswith("http"):
            return poster_path
        return f"{self.image_base_url}/w500{poster_path}"

    @staticmethod
    def _extract_year(release_date: Any) -> int:
        if not isinstance(release_date, str) or len(release_date) < 4:
            return 0
        try:
            return int(release_date[:4])
        except ValueError:
            return 0

    def _genre_label(self, genre_id: int) -> str:
        return self.genre_map.get(genre_id) or TMDB_ID_TO_GENRE_NAME.get(genre_id, UNKNOWN_GENRE)

    @staticmethod
    def _record_genre_ids(record: Dict[str, Any]) -> List[int]:
        if isinstance(record.get("genres"), list):
            return [g["id"] for g in record["genres"] if isinstance(g, dict) and "id" in g]
        return list(record.get("genre_ids") or [])

    def convert_to_movie(self, record: Dict[str, Any]) -> Movie:
        """Normalize a discover/search record or a details record into a Movie."""
        if isinstance(record.get("genres"), list):
            genres = [g["name"] for g in record["genres"] if isinstance(g, dict) and "name" in g]
        else:
            genres = [self._genre_label(gid) for gid in record.get("genre_ids") or []]

        return Movie(
            title=record["title"],
            year=self._extract_year(record.get("release_date")),
            rating_value=float(record.get("vote_average") or 0),
            description=record.get("overview") or NO_DESCRIPTION,
            poster_url=self._build_poster_url(record.get("poster_path")),
            external_id=record.get("id"),
            runtime_minutes=record.get("runtime"),
            genres=genres,
            vote_count=record.get("vote_count"),
            popularity=record.get("popularity"),
            imdb_id=record.get("imdb_id") or None,
        )

    def _convert_records(self, records: List[Dict[str, Any]], path: str) -> List[Movie]:
        try:
            return [self.convert_to_movie(record) for record in records]
        except (KeyError, TypeError, ValueError) as e:
            raise CatalogError(f"Malformed movie record from TMDB for {path}") from e

    async def _discover_records(self, params: DiscoverParams) -> List[Dict[str, Any]]:
        await self.load_genres()
        query = {
            "with_genres": ",".join(str(g) for g in params.genres),
            "vote_average.gte": params.min_rating,
            "vote_count.gte": params.min_vote_count,
            "primary_release_date.gte": f"{params.release_year_from}-01-01" if params.release_year_from else None,
            "primary_release_date.lte": f"{params.release_year_to}-12-31" if params.release_year_to else None,
            "sort_by": params.sort_by,
            "page": params.page,
            "region": self.region,
        }
        payload = await self._get("/discover/movie", query)
        records = payload.get("results") or []
        if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
            raise CatalogError("Unexpected discover results from TMDB")
        return records

    async def discover_movies(self, params: DiscoverParams) -> List[Movie]:
        movies = self._convert_records(await self._discover_records(params), "/discover/movie")
        self.logger.info("Movies discovered", genres=params.genres, count=len(movies))
        return movies

    async def get_movie_details(self, movie_id: int) -> Movie:
        cache_key = self.cache.create_details_key(movie_id)
        cached = self.cache.get(cache_key)
        if cached is not None:
            return Movie(**cached)
        payload = await self._get(f"/movie/{movie_id}")
        try:
            movie = self.convert_to_movie(payload)
        except (KeyError, TypeError, ValueError) as e:
            raise CatalogError(f"Malformed details record for movie {movie_id}") from e
        self.cache.set(cache_key, asdict(movie))
        return movie

    async def search_movies(self, query: str, page: int = 1) -> List[Movie]:
        cache_key = self.cache.create_search_key(query, page)
        cached = self.cache.get(cache_key)
        if cached is not None:
            return [Movie(**m) for m in cached]
        await self.load_genres()
        payload = await self._get("/search/movie", {"query": query, "page": page, "region": self.region})
        movies = self._convert_records(payload.get("results") or [], "/search/movie")
        self.cache.set(cache_key, [asdict(m) for m in movies])
        return movies

    async def get_movies_by_genre_combination(
        self, genre_ids: List[int], require_all: bool = False, limit: int = 10
    ) -> GenreCombinationResult:
        category = get_category_name(genre_ids)
        records = await self._discover_records(
            DiscoverParams(
                genres=list(genre_ids),
                min_rating=COMBINATION_MIN_RATING,
                min_vote_count=COMBINATION_MIN_VOTES,
                sort_by="vote_average.desc",
            )
        )

        # Upstream matching is "any of"; enforce "all of" on the raw ids.
        if require_all and len(genre_ids) > 1:
            required = set(genre_ids)
            records = [r for r in records if required.issubset(self._record_genre_ids(r))]

        movies = self._convert_records(records[:limit], "/discover/movie")
        self.logger.info(
            "Genre combination resolved",
            category=category,
            require_all=require_all,
            count=len(movies),
        )
        return GenreCombinationResult(category=category, movies=movies)
