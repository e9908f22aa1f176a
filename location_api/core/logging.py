"""Logging configuration module."""

from logging import (
    CRITICAL,
    DEBUG,
    ERROR,
    INFO,
    WARNING,
    Handler,
    Logger,
    StreamHandler,
    getLogger,
)
from typing import Any, cast

import structlog
from structlog import dev, processors, stdlib
from structlog.processors import JSONRenderer, TimeStamper, dict_tracebacks
from structlog.stdlib import BoundLogger

from location_api.core.config import settings

LOG_LEVELS: dict[str, int] = {
    "debug": DEBUG,
    "info": INFO,
    "warning": WARNING,
    "error": ERROR,
    "critical": CRITICAL,
}


def configure_logging(testing: bool = False, level: str | None = None) -> None:
    """Configure structured logging for the application.

    Args:
        testing: Whether the application is running in test mode
        level: Log level name, defaults to ``settings.LOG_LEVEL``
    """
    log_level = LOG_LEVELS.get((level or settings.LOG_LEVEL).lower(), INFO)
    json_logs = settings.JSON_LOGS and not testing

    root_logger: Logger = getLogger()
    root_logger.setLevel(log_level)

    package_logger: Logger = getLogger("location_api")
    package_logger.setLevel(log_level)

    handler: Handler = StreamHandler()
    handler.setLevel(log_level)

    shared_processors = [
        stdlib.add_logger_name,
        stdlib.add_log_level,
        stdlib.PositionalArgumentsFormatter(),
        TimeStamper(fmt="%Y-%m-%d %H:%M:%S.%f"),
        dict_tracebacks,
    ]

    structlog.configure(
        processors=[
            stdlib.filter_by_level,
            *shared_processors,
            processors.format_exc_info,
            JSONRenderer() if json_logs else processors.KeyValueRenderer(),
        ],
        context_class=dict,
        logger_factory=stdlib.LoggerFactory(),
        wrapper_class=stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = stdlib.ProcessorFormatter(
        processor=JSONRenderer() if json_logs else dev.ConsoleRenderer(),
        foreign_pre_chain=shared_processors,
    )
    handler.setFormatter(formatter)

    # Clear existing handlers to prevent duplicates
    root_logger.handlers = []
    package_logger.handlers = []

    root_logger.addHandler(handler)
    package_logger.addHandler(handler)
    package_logger.propagate = False


def get_logger(name: str | None = None) -> BoundLogger:
    """Get a configured logger instance.

    Args:
        name: Optional logger name, usually ``__name__``

    Returns:
        A structured logger instance.
    """
    return cast(BoundLogger, structlog.get_logger(name))


def get_context_logger(name: str | None = None, **context: Any) -> BoundLogger:
    """Get a logger with bound resolution context.

    Args:
        name: Optional logger name
        **context: Key/value pairs bound to every entry, e.g. ``location_id``

    Returns:
        Configured logger with context
    """
    logger: BoundLogger = get_logger(name)
    bound = {key: value for key, value in context.items() if value is not None}
    if bound:
        logger = logger.bind(**bound)
    return logger
