from unittest.mock import MagicMock, patch

import orjson
import pytest
import redis

from domain.exceptions import CacheError, StorageFullError
from repositories.cache import CACHE_PREFIX, ExpiringCacheRepository
from repositories.kv_store import InMemoryKeyValueStore, RedisKeyValueStore
from tests.factories import UnavailableStore


class TestExpiringCacheRepository:
    """Test suite for ExpiringCacheRepository."""

    def test_round_trip_before_ttl(self, cache: ExpiringCacheRepository, clock):
        # Arrange
        value = {"category": "War/Drama", "movies": [{"title": "1917"}]}

        # Act
        cache.set("k", value, ttl=60)
        clock.advance(60)

        # Assert
        assert cache.get("k") == value

    def test_expired_entry_is_evicted_on_read(self, cache, clock, memory_store):
        cache.set("k", [1, 2, 3], ttl=60)
        clock.advance(61)

        assert cache.get("k") is None
        assert memory_store.get(CACHE_PREFIX + "k") is None

    def test_default_ttl_is_one_day(self, cache, clock):
        cache.set("k", "v")

        clock.advance(24 * 60 * 60)
        assert cache.get("k") == "v"
        clock.advance(1)
        assert cache.get("k") is None

    def test_record_format(self, cache, clock, memory_store):
        cache.set("k", {"a": 1}, ttl=2)

        record = orjson.loads(memory_store.get(CACHE_PREFIX + "k"))

        assert record == {"data": {"a": 1}, "createdAt": clock.now, "ttl": 2000}

    def test_set_overwrites(self, cache):
        cache.set("k", "old")
        cache.set("k", "new")

        assert cache.get("k") == "new"

    def test_missing_key(self, cache):
        assert cache.get("nope") is None

    def test_unparseable_entry_reads_as_absent(self, cache, memory_store):
        memory_store.set(CACHE_PREFIX + "broken", "{not json")

        assert cache.get("broken") is None

    def test_remove_and_clear_all_only_touch_prefixed_keys(self, cache, memory_store):
        memory_store.set("other_app", "keep")
        cache.set("a", 1)
        cache.set("b", 2)

        cache.remove("a")
        assert cache.get("a") is None
        assert cache.get("b") == 2

        cache.clear_all()
        assert cache.get("b") is None
        assert memory_store.get("other_app") == "keep"

    def test_clear_expired_removes_stale_and_broken_entries(self, cache, clock, memory_store):
        cache.set("short", 1, ttl=1)
        cache.set("long", 2, ttl=100)
        memory_store.set(CACHE_PREFIX + "broken", "garbage")
        clock.advance(5)

        cache.clear_expired()

        assert sorted(memory_store.keys(CACHE_PREFIX)) == [CACHE_PREFIX + "long"]

    def test_storage_full_retries_after_clearing_expired(self, mock_logger, clock):
        store = InMemoryKeyValueStore(capacity_bytes=200)
        cache = ExpiringCacheRepository(store=store, logger=mock_logger, clock=clock)
        cache.set("stale", "x" * 60, ttl=1)
        clock.advance(2)

        cache.set("fresh", "y" * 60, ttl=100)

        assert cache.get("fresh") == "y" * 60
        assert store.get(CACHE_PREFIX + "stale") is None
        mock_logger.warning.assert_called_once()

    def test_second_storage_failure_is_dropped(self, mock_logger, clock):
        store = InMemoryKeyValueStore(capacity_bytes=10)
        cache = ExpiringCacheRepository(store=store, logger=mock_logger, clock=clock)

        cache.set("big", "z" * 100)

        assert cache.get("big") is None
        mock_logger.error.assert_called_once()

    def test_get_stats(self, cache, clock):
        first = clock.now
        cache.set("a", 1)
        clock.advance(10)
        cache.set("b", 2)

        stats = cache.get_stats()

        assert stats["count"] == 2
        assert stats["size"] > 0
        assert stats["oldest_entry"] == first

    def test_genre_key_ignores_order(self, cache):
        assert cache.create_genre_key([28, 12], False) == cache.create_genre_key([12, 28], False)

    @pytest.mark.parametrize("ids", [[18], [10752, 18], [878, 53, 28]])
    def test_genre_key_distinguishes_mode(self, cache, ids):
        assert cache.create_genre_key(ids, True) != cache.create_genre_key(ids, False)

    def test_genre_key_sorts_numerically(self, cache):
        assert cache.create_genre_key([10752, 18, 9648], True) == "genres_18_9648_10752_all"

    def test_other_key_families(self, cache):
        assert cache.create_details_key(603) == "details_603"
        assert cache.create_search_key("The Matrix", 2) == "search_the matrix_2"
        assert cache.create_discover_key({"page": 1, "genres": [28], "region": None}) == (
            'discover_{"genres":[28],"page":1}'
        )


class TestInMemoryKeyValueStore:
    def test_capacity_counts_keys_and_values(self):
        store = InMemoryKeyValueStore(capacity_bytes=6)
        store.set("ab", "cd")

        with pytest.raises(StorageFullError):
            store.set("ef", "gh")

    def test_overwrite_does_not_double_count(self):
        store = InMemoryKeyValueStore(capacity_bytes=4)
        store.set("ab", "cd")

        store.set("ab", "ef")

        assert store.get("ab") == "ef"


class TestRedisKeyValueStore:
    @pytest.fixture
    def redis_client(self):
        with patch("repositories.kv_store.redis.from_url") as from_url:
            client = MagicMock()
            from_url.return_value = client
            yield client

    def test_delegates_to_redis(self, redis_client):
        store = RedisKeyValueStore("redis://localhost:6379/0")
        redis_client.get.return_value = "value"
        redis_client.scan_iter.return_value = iter(["movie_cache_a"])

        assert store.get("k") == "value"
        store.set("k", "v")
        store.remove("k")

        redis_client.set.assert_called_once_with("k", "v")
        redis_client.delete.assert_called_once_with("k")
        assert store.keys("movie_cache_") == ["movie_cache_a"]
        redis_client.scan_iter.assert_called_once_with(match="movie_cache_*")

    def test_out_of_memory_becomes_storage_full(self, redis_client):
        store = RedisKeyValueStore("redis://localhost:6379/0")
        redis_client.set.side_effect = redis.exceptions.ResponseError(
            "OOM command not allowed when used memory > 'maxmemory'."
        )

        with pytest.raises(StorageFullError):
            store.set("k", "v")

    def test_other_response_errors_become_cache_errors(self, redis_client):
        store = RedisKeyValueStore("redis://localhost:6379/0")
        redis_client.set.side_effect = redis.exceptions.ResponseError("WRONGTYPE")

        with pytest.raises(CacheError) as excinfo:
            store.set("k", "v")

        assert not isinstance(excinfo.value, StorageFullError)

    @pytest.mark.parametrize(
        "operation, call",
        [
            ("get", lambda store: store.get("k")),
            ("set", lambda store: store.set("k", "v")),
            ("delete", lambda store: store.remove("k")),
            ("scan_iter", lambda store: store.keys("movie_cache_")),
        ],
    )
    def test_connection_errors_become_cache_errors(self, redis_client, operation, call):
        store = RedisKeyValueStore("redis://localhost:6379/0")
        getattr(redis_client, operation).side_effect = redis.exceptions.ConnectionError("Connection refused")

        with pytest.raises(CacheError):
            call(store)


class TestCacheWithUnavailableStore:
    """A broken backing store must never escape the cache."""

    @pytest.fixture
    def store(self) -> UnavailableStore:
        return UnavailableStore()

    @pytest.fixture
    def broken_cache(self, store, mock_logger, clock) -> ExpiringCacheRepository:
        return ExpiringCacheRepository(store=store, logger=mock_logger, clock=clock)

    def test_failed_read_is_a_miss(self, broken_cache, mock_logger):
        assert broken_cache.get("k") is None
        mock_logger.error.assert_called_once()

    def test_failed_write_is_dropped(self, broken_cache, store, mock_logger):
        broken_cache.set("k", {"a": 1})

        assert store.calls == ["set"]
        mock_logger.error.assert_called_once()

    def test_maintenance_calls_are_absorbed(self, broken_cache, store):
        broken_cache.remove("k")
        broken_cache.clear_all()
        broken_cache.clear_expired()

        assert store.calls == ["remove", "keys", "keys"]
        assert broken_cache.get_stats() == {"count": 0, "size": 0, "oldest_entry": None}
