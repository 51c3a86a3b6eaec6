"""Structured Logging for Stannum

structlog-based logging shared by every stannum module:
- Colored, human-readable dev output
- JSON structured output for log aggregation
- Sensitive key censoring
- Library loggers stay silent until the host application configures logging
"""
import logging
import sys

import structlog
from structlog.types import EventDict, Processor

from stannum import __version__

LIBRARY_LOGGER_NAME = "stannum"


def _censor_sensitive_keys(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Processor that redacts sensitive information."""
    sensitive_keys = {"password", "token", "secret", "authorization", "cookie", "hashed_password"}

    def _redact(obj: dict | list | str, depth: int = 0) -> dict | list | str:
        if depth > 5:
            return obj
        if isinstance(obj, dict):
            return {
                k: "[REDACTED]" if str(k).lower() in sensitive_keys else _redact(v, depth + 1)
                for k, v in obj.items()
            }
        if isinstance(obj, list):
            return [_redact(item, depth + 1) for item in obj]
        return obj

    return _redact(event_dict)


def _add_library_info(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Processor that adds library metadata."""
    event_dict.setdefault("library", "stannum")
    event_dict.setdefault("version", __version__)
    return event_dict


def get_shared_processors() -> list[Processor]:
    """Processors used in both dev and JSON configurations."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _add_library_info,
        _censor_sensitive_keys,
    ]


def configure_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    """Configure structlog and route the ``stannum`` loggers to stdout.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Defaults to settings.LOG_LEVEL.
        json_logs: If True, output JSON. If False, colored console output. Defaults to settings.LOG_JSON.
    """
    from stannum.config import get_settings

    settings = get_settings()
    level = settings.LOG_LEVEL if level is None else level
    json_logs = settings.LOG_JSON if json_logs is None else json_logs
    log_level = getattr(logging, level.upper(), logging.WARNING)

    shared_processors = get_shared_processors()

    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.plain_traceback,
        )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    library_logger.handlers = [handler]
    library_logger.setLevel(log_level)
    library_logger.propagate = False


def get_logger(name: str = LIBRARY_LOGGER_NAME) -> structlog.stdlib.BoundLogger:
    """Get a structured logger wrapping the stdlib logger of the same name.

    Args:
        name: Logger name (typically a ``stannum.*`` domain name)

    Returns:
        Lazily configured structlog logger
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


class LoggerRegistry:
    """Registry of loggers for the library's domains."""

    _loggers: dict[str, structlog.stdlib.BoundLogger] = {}

    @classmethod
    def get(cls, name: str) -> structlog.stdlib.BoundLogger:
        """Get or create a logger for the given domain."""
        if name not in cls._loggers:
            cls._loggers[name] = get_logger(f"{LIBRARY_LOGGER_NAME}.{name}")
        return cls._loggers[name]


def contract_logger() -> structlog.stdlib.BoundLogger:
    """Logger for contract building events."""
    return LoggerRegistry.get("contracts")


def messages_logger() -> structlog.stdlib.BoundLogger:
    """Logger for message strategy events."""
    return LoggerRegistry.get("messages")


def validation_logger() -> structlog.stdlib.BoundLogger:
    """Logger for parameter validation events."""
    return LoggerRegistry.get("validation")


logging.getLogger(LIBRARY_LOGGER_NAME).addHandler(logging.NullHandler())
