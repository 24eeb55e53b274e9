import logging

import orjson
import pytest
import structlog

from core.log_config import SERVICE_NAME, add_service_name, build_processors, orjson_dumps, setup_logging
from core.settings import Settings


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


class TestLogConfig:
    def test_json_mode_renders_with_orjson(self):
        renderer = build_processors(json_logs=True)[-1]

        line = renderer(None, "info", {"event": "Cache hit", "cache_key": "genres_18_10752_all"})

        assert orjson.loads(line) == {"event": "Cache hit", "cache_key": "genres_18_10752_all"}

    def test_console_mode_renders_for_humans(self):
        assert isinstance(build_processors(json_logs=False)[-1], structlog.dev.ConsoleRenderer)

    def test_service_name_is_added_without_overriding(self):
        assert add_service_name(None, "info", {})["service"] == SERVICE_NAME
        assert add_service_name(None, "info", {"service": "other"})["service"] == "other"

    def test_orjson_dumps_uses_fallback_for_unknown_types(self):
        assert orjson_dumps({"value": {1}}, default=list) == '{"value":[1]}'

    def test_setup_applies_level_and_renderer(self):
        settings = Settings(TMDB_API_KEY=None, LOG_JSON=True, LOG_LEVEL="warning")

        setup_logging(settings)

        assert logging.getLogger().level == logging.WARNING
        assert isinstance(structlog.get_config()["processors"][-1], structlog.processors.JSONRenderer)

    def test_bound_context_reaches_event(self):
        structlog.contextvars.bind_contextvars(ratings_file="ratings.json")
        merge = build_processors(json_logs=True)[0]

        event = merge(None, "info", {"event": "Starting recommendation resolution"})

        assert event["ratings_file"] == "ratings.json"
