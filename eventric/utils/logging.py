import logging
import sys

import structlog

from eventric.config import get_settings


def get_logger(name: str | None = None):
    """
    Get a logger with eventric prefix.

    Args:
        name: Module name (typically __name__). If None, returns root eventric logger.

    Returns:
        A structlog logger with eventric prefix.
    """
    if name is None:
        return structlog.get_logger("eventric")
    if name == "eventric" or name.startswith("eventric."):
        return structlog.get_logger(name)
    return structlog.get_logger(f"eventric.{name}")


def setup_third_party_logging(debug_all: bool = False):
    """
    Configure third-party library logging levels.

    Args:
        debug_all: If True, leave third-party loggers untouched.
                   If False, set them to WARNING level.
    """

    if debug_all:
        return

    for log_name in list(logging.Logger.manager.loggerDict):
        if log_name == "eventric" or log_name.startswith("eventric."):
            continue
        logging.getLogger(log_name).setLevel(logging.WARNING)


def format_context(logger, method_name, event_dict):
    """Format bound context into the event message"""
    excluded = {"level", "timestamp", "logger", "stack", "exc_info", "event"}
    context = " ".join(f"{k}={v}" for k, v in event_dict.items() if k not in excluded)

    event = event_dict.get("event", "")
    event_dict["event"] = f"{event} [{context}]" if context else event

    return event_dict


def setup_logging() -> None:
    """
    Setup logging for an application using eventric.

    The library never calls this itself; applications opt in at startup.

    Settings (see eventric.config.LoggingSettings):
        DEBUG_ALL: Enable DEBUG logging for all libraries.
        LOG_LEVEL: Level for the eventric namespace (default INFO).
    """
    settings = get_settings().logging

    root_level = "DEBUG" if settings.debug_all else "WARNING"
    logging.basicConfig(
        stream=sys.stderr,
        level=root_level,
        format="%(levelname)s:%(name)s: %(message)s",
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            format_context,
            structlog.stdlib.render_to_log_kwargs,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    setup_third_party_logging(settings.debug_all)

    logging.getLogger("eventric").setLevel(settings.log_level)
