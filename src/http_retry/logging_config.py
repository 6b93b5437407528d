"""Structured logging for the HTTP retry layer using structlog.

Retry decisions are logged as structured events (url, attempt, delay_ms,
error_kind, ...). In production they render as JSON lines, in development
as colored console output. The standard library loggers of httpx and
httpcore are routed through the same renderer.
"""

import logging
import sys
from typing import Callable, Optional

import structlog
from structlog.types import EventDict, Processor, WrappedLogger


RETRY_LOGGER_NAME = "http_retry"

# Transport libraries log every request at INFO; the retry layer already
# reports each failure it acts on.
NOISY_LOGGERS = ("httpx", "httpcore", "asyncio")


def make_app_context(app_name: str, app_version: Optional[str] = None) -> Processor:
    """Build a processor stamping every event with the application identity."""

    def add_app_context(
        logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> EventDict:
        event_dict.setdefault("app", app_name)
        if app_version:
            event_dict.setdefault("app_version", app_version)
        return event_dict

    return add_app_context


def configure_logging(
    log_level: str = "INFO",
    environment: str = "development",
    app_name: str = "http-retry",
    app_version: Optional[str] = None,
) -> None:
    """Configure structlog and the root logger.

    Args:
        log_level: Level for the http_retry loggers and the root handler
        environment: "production" renders JSON, anything else the console
        app_name: Value of the `app` field on every event
        app_version: Value of the `app_version` field, omitted when empty
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    is_production = environment.lower() == "production"

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        make_app_context(app_name, app_version),
    ]
    if is_production:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=shared_processors,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    logging.getLogger(RETRY_LOGGER_NAME).setLevel(level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    structlog.get_logger(__name__).debug(
        "Logging configured",
        log_level=logging.getLevelName(level),
        environment=environment,
        renderer="json" if is_production else "console",
    )


def make_log_print(name: str = "http_retry.retry") -> Callable[[str], None]:
    """Build a plain string sink that writes each message as an info event.

    Suitable as the `log_print` hook of RetryInterceptor when the one-line
    retry messages should land in the structured log stream.

    Args:
        name: Logger name the messages are emitted under

    Returns:
        Callable accepting a formatted message
    """
    logger = structlog.get_logger(name)

    def log_print(message: str) -> None:
        logger.info(message)

    return log_print
