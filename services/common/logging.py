"""Structured logging for shipping services.

Everything goes through the stdlib root logger so that records from
uvicorn, httpx and structlog share one renderer (JSON by default).
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import Any

import structlog

Processor = Callable[[Any, str, dict[str, Any]], dict[str, Any]]

# Chatty third-party loggers. Request lines are already logged by
# ObservabilityMiddleware and the quote client.
_QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def _numeric_level(level: str) -> int:
    value = logging.getLevelName((level or "").upper())
    return value if isinstance(value, int) else logging.INFO


def _add_service(service_name: str | None) -> Processor:
    def processor(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        if service_name:
            event_dict.setdefault("service", service_name)
        return event_dict

    return processor


def _renderer(json_logs: bool) -> Processor:
    if json_logs:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(
    level: str = "INFO",
    *,
    json_logs: bool = True,
    service_name: str | None = None,
) -> None:
    """Route structlog and stdlib logging to stdout.

    Args:
        level: Logging level name; unknown names fall back to INFO
        json_logs: Render JSON lines (True) or human-readable console output
        service_name: Added as ``service`` to every event that lacks one
    """
    numeric_level = _numeric_level(level)

    pre_chain: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", key="timestamp"),
        _add_service(service_name),
        structlog.processors.dict_tracebacks,
    ]

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(json_logs),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(numeric_level)
    logging.captureWarnings(True)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(
    name: str,
    *,
    correlation_id: str | None = None,
    service_name: str | None = None,
) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger, optionally bound to a request and service."""
    logger = structlog.stdlib.get_logger(name)
    if correlation_id:
        logger = logger.bind(correlation_id=correlation_id)
    if service_name:
        logger = logger.bind(service=service_name)
    return logger


__all__ = [
    "configure_logging",
    "get_logger",
]
