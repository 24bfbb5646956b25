"""
Structlog configuration and helpers.

Events are rendered as JSON in production and with the console renderer
during development. Request-scoped values bound with :func:`bind_context`
(``request_id``, ``path``, ``method``) are merged into every event, so a
``prime_cache.failed`` warning can be traced back to the page that
triggered it.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

import structlog

from primecache.infra.config.settings import Settings, get_settings

# Outbound requests are logged by the transport itself.
NOISY_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def resolve_logging_options(
    settings: Optional[Settings] = None,
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
) -> Tuple[int, str]:
    """Return the numeric level and renderer name, explicit arguments first."""
    settings = settings or get_settings()
    level_name = (log_level or settings.log_level or "INFO").upper()
    fmt = (log_format or settings.log_format or "json").lower()
    return getattr(logging, level_name, logging.INFO), fmt


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> None:
    """Configure stdlib logging and structlog.

    Args:
        log_level: Level name (e.g., "WARNING"). Defaults from settings.
        log_format: "json" or "console". Defaults from settings.
        settings: Settings to read defaults from instead of ``get_settings()``.
    """
    level, fmt = resolve_logging_options(settings, log_level, log_format)

    logging.basicConfig(format="%(message)s", level=level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    renderer = (
        structlog.processors.JSONRenderer(sort_keys=True)
        if fmt == "json"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            # request.error in the middleware logs with exc_info
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:  # type: ignore[name-defined]
    """Get a structlog logger bound with a name."""
    return structlog.get_logger(name) if name else structlog.get_logger()


def bind_context(**kwargs) -> None:
    """Bind request-scoped values (request_id, path, method) to every event."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Drop request-scoped values once the response is sent."""
    structlog.contextvars.clear_contextvars()
