from typing import Dict, Iterable, List, Optional

import redis

from domain.exceptions import CacheError, StorageFullError
from domain.interfaces import IKeyValueStore


class InMemoryKeyValueStore(IKeyValueStore):
    """Process-local string store with an optional size limit in bytes."""

    def __init__(self, capacity_bytes: Optional[int] = None):
        self.capacity_bytes = capacity_bytes
        self._data: Dict[str, str] = {}

    def _size_with(self, key: str, value: str) -> int:
        size = sum(len(k) + len(v) for k, v in self._data.items() if k != key)
        return size + len(key) + len(value)

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if self.capacity_bytes is not None and self._size_with(key, value) > self.capacity_bytes:
            raise StorageFullError(f"Storing {key!r} would exceed {self.capacity_bytes} bytes")
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self, prefix: str = "") -> List[str]:
        return [k for k in self._data if k.startswith(prefix)]


class RedisKeyValueStore(IKeyValueStore):
    """Redis-backed store. Every redis failure surfaces as ``CacheError``."""

    def __init__(self, redis_url: str):
        self.redis = redis.from_url(redis_url, decode_responses=True)

    def get(self, key: str) -> Optional[str]:
        try:
            return self.redis.get(key)
        except redis.exceptions.RedisError as e:
            raise CacheError(f"Redis GET {key!r} failed: {e}") from e

    def set(self, key: str, value: str) -> None:
        try:
            self.redis.set(key, value)
        except redis.exceptions.ResponseError as e:
            # maxmemory reached with a noeviction policy
            if str(e).startswith("OOM"):
                raise StorageFullError(str(e)) from e
            raise CacheError(f"Redis SET {key!r} failed: {e}") from e
        except redis.exceptions.RedisError as e:
            raise CacheError(f"Redis SET {key!r} failed: {e}") from e

    def remove(self, key: str) -> None:
        try:
            self.redis.delete(key)
        except redis.exceptions.RedisError as e:
            raise CacheError(f"Redis DEL {key!r} failed: {e}") from e

    def keys(self, prefix: str = "") -> Iterable[str]:
        try:
            return list(self.redis.scan_iter(match=f"{prefix}*"))
        except redis.exceptions.RedisError as e:
            raise CacheError(f"Redis SCAN {prefix!r} failed: {e}") from e
