import time
from typing import Any, Callable, Dict, List, Optional

import orjson
from structlog.stdlib import BoundLogger

from domain.entities import CacheEntry
from domain.exceptions import CacheError, StorageFullError
from domain.interfaces import ICacheRepository, IKeyValueStore

CACHE_PREFIX = "movie_cache_"
DEFAULT_TTL = 24 * 60 * 60


def now_ms() -> int:
    return int(time.time() * 1000)


class ExpiringCacheRepository(ICacheRepository):
    """TTL cache over a plain key-value store.

    Entries are JSON records ``{"data", "createdAt", "ttl"}`` with times in
    milliseconds. Expiry is lazy: a stale entry is only removed when ``get``
    finds it or when ``clear_expired`` is called. TTLs passed in are seconds.
    Store failures are logged and absorbed: a failed read is a miss and a
    failed write is dropped.
    """

    def __init__(
        self,
        store: IKeyValueStore,
        logger: BoundLogger,
        clock: Callable[[], int] = now_ms,
        default_ttl: int = DEFAULT_TTL,
    ):
        self.store = store
        self.logger = logger
        self.clock = clock
        self.default_ttl = default_ttl

    def _storage_key(self, key: str) -> str:
        return CACHE_PREFIX + key

    @staticmethod
    def _decode(raw: str) -> CacheEntry:
        payload = orjson.loads(raw)
        return CacheEntry(data=payload["data"], created_at=payload["createdAt"], ttl=payload["ttl"])

    def get(self, key: str) -> Any:
        try:
            raw = self.store.get(self._storage_key(key))
        except CacheError as e:
            self.logger.error("Error reading from cache", key=key, error=str(e))
            return None
        if raw is None:
            return None
        try:
            entry = self._decode(raw)
        except (orjson.JSONDecodeError, KeyError, TypeError) as e:
            self.logger.error("Error reading from cache", key=key, error=str(e))
            return None
        if entry.is_expired(self.clock()):
            self.logger.debug("Cache entry expired", key=key)
            self.remove(key)
            return None
        return entry.data

    def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        ttl = self.default_ttl if ttl is None else ttl
        try:
            self._write(key, value, ttl)
        except StorageFullError as e:
            self.logger.warning("Cache storage full, clearing expired entries", key=key, error=str(e))
            self.clear_expired()
            try:
                self._write(key, value, ttl)
            except CacheError as retry_error:
                self.logger.error("Failed to cache even after cleanup", key=key, error=str(retry_error))
        except CacheError as e:
            self.logger.error("Error writing to cache", key=key, error=str(e))

    def _write(self, key: str, value: Any, ttl: int) -> None:
        record = {"data": value, "createdAt": self.clock(), "ttl": int(ttl * 1000)}
        self.store.set(self._storage_key(key), orjson.dumps(record).decode())

    def remove(self, key: str) -> None:
        try:
            self.store.remove(self._storage_key(key))
        except CacheError as e:
            self.logger.error("Error removing from cache", key=key, error=str(e))

    def clear_all(self) -> None:
        try:
            for storage_key in self.store.keys(CACHE_PREFIX):
                self.store.remove(storage_key)
        except CacheError as e:
            self.logger.error("Error clearing cache", error=str(e))

    def clear_expired(self) -> None:
        now = self.clock()
        removed = 0
        try:
            for storage_key in self.store.keys(CACHE_PREFIX):
                raw = self.store.get(storage_key)
                if raw is None:
                    continue
                try:
                    expired = self._decode(raw).is_expired(now)
                except (orjson.JSONDecodeError, KeyError, TypeError):
                    expired = True
                if expired:
                    self.store.remove(storage_key)
                    removed += 1
        except CacheError as e:
            self.logger.error("Error clearing expired cache entries", removed=removed, error=str(e))
            return
        self.logger.info("Expired cache entries cleared", removed=removed)

    def get_stats(self) -> Dict[str, Optional[int]]:
        count = 0
        size = 0
        oldest: Optional[int] = None
        try:
            for storage_key in self.store.keys(CACHE_PREFIX):
                raw = self.store.get(storage_key)
                if raw is None:
                    continue
                count += 1
                size += len(storage_key) + len(raw)
                try:
                    created_at = self._decode(raw).created_at
                except (orjson.JSONDecodeError, KeyError, TypeError):
                    continue
                if oldest is None or created_at < oldest:
                    oldest = created_at
        except CacheError as e:
            self.logger.error("Error reading cache stats", error=str(e))
        return {"count": count, "size": size, "oldest_entry": oldest}

    def create_genre_key(self, genre_ids: List[int], require_all: bool = False) -> str:
        sorted_ids = sorted(genre_ids)
        mode = "all" if require_all else "any"
        return f"genres_{'_'.join(str(i) for i in sorted_ids)}_{mode}"

    def create_discover_key(self, params: Dict[str, Any]) -> str:
        cleaned = {k: params[k] for k in sorted(params) if params[k] is not None}
        return f"discover_{orjson.dumps(cleaned).decode()}"

    def create_details_key(self, movie_id: int) -> str:
        return f"details_{movie_id}"

    def create_search_key(self, query: str, page: int = 1) -> str:
        return f"search_{query.lower()}_{page}"
