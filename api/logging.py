"""Structured logging configuration.

The engine packages log through ``structlog.get_logger`` and never touch
output settings; this module decides how their events are rendered. Events
emitted below the API layer:

    registry_built               once per entity kind and thresholds (debug)
    field_score_calculated       every field engine run (debug)
    article_seo_analyzed         every composite article analysis (debug)
    article_seo_analysis_failed  analyzer error, with traceback (error)
    knowledge_graph_assembled    every article, listing or profile graph (debug)

Scoring runs per request, so the debug events stay hidden unless
``LOG_LEVEL=DEBUG``.
"""

import logging
import sys
from collections.abc import MutableMapping
from typing import Any

import structlog

from api.config import get_settings

SERVICE_NAME = "seo-doctor"

# Third-party loggers that only matter when something is wrong
QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def add_service_context(env: str):
    """Processor stamping every event with the service name and environment."""

    def processor(
        logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
    ) -> MutableMapping[str, Any]:
        event_dict.setdefault("service", SERVICE_NAME)
        event_dict.setdefault("env", env)
        return event_dict

    return processor


def setup_logging() -> None:
    """Configure structlog for the API and the engine modules it drives."""
    settings = get_settings()

    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        add_service_context(settings.env),
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if settings.is_production:
        # analyzer failures ship their traceback as structured frames
        shared_processors.append(structlog.processors.dict_tracebacks)
        shared_processors.append(structlog.processors.JSONRenderer())
    else:
        shared_processors.append(
            structlog.dev.ConsoleRenderer(
                colors=not settings.is_test,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=shared_processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
