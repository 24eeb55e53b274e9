import logging
import sys

import orjson
import structlog

from core.settings import Settings

SERVICE_NAME = "cinevote"


def add_service_name(logger, method_name, event_dict):
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def orjson_dumps(obj, default=None) -> str:
    return orjson.dumps(obj, default=default).decode()


def build_processors(json_logs: bool) -> list:
    shared = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_service_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if json_logs:
        return shared + [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer(serializer=orjson_dumps)]
    return shared + [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]


def setup_logging(settings: Settings) -> None:
    """Configure structlog on top of stdlib logging.

    Log lines go to stderr so stdout only carries the recommendation JSON.
    ``LOG_JSON`` switches to one JSON object per line, ``LOG_LEVEL`` sets the
    threshold.
    """
    level = getattr(logging, settings.log_level)
    structlog.configure(
        processors=build_processors(settings.log_json),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level, force=True)
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))
