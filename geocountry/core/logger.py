import logging

import structlog

from geocountry.core.config import settings

_configured = False


def _level_from_name(name: str | None) -> int:
    level = logging.getLevelName((name or "").upper())
    if isinstance(level, int):
        return level
    return logging.INFO


def configure_logging(level: str | None = None, json: bool | None = None) -> None:
    """
    Set up structlog once per process.

    - level: log level name, defaults to settings.LOG_LEVEL
    - json: render JSON lines instead of the console renderer
    """
    global _configured

    if _configured:
        return

    use_json = settings.LOG_JSON if json is None else json
    renderer = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            _level_from_name(level or settings.LOG_LEVEL)
        ),
        cache_logger_on_first_use=True,
    )
    _configured = True
