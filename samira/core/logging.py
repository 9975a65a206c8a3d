"""Structured logging for samira.

The client only emits events through ``structlog.get_logger``. Applications
that want samira's events rendered call :func:`setup_logging` once at startup;
the library never configures logging on its own.
"""

import logging
from typing import Any, List, Optional

import structlog
from structlog.typing import EventDict

from .config import get_global_settings

LIBRARY_LOGGER = "samira"


def _redact_api_key(
    logger: Any, method_name: str, event_dict: EventDict
) -> EventDict:
    """Mask an ``api_key`` field bound by callers."""
    if "api_key" in event_dict:
        event_dict["api_key"] = "[REDACTED]"
    return event_dict


def _processors(json_output: bool) -> List[Any]:
    processors: List[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        _redact_api_key,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    return processors


def setup_logging(log_level: Optional[str] = None, json_output: bool = True) -> None:
    """
    Route samira's structlog events through stdlib logging.

    :param log_level: DEBUG, INFO, WARNING... (``LOG_LEVEL`` setting if None)
    :param json_output: JSON lines when True, key=value console output otherwise
    """
    level_name = (log_level or get_global_settings().log_level).upper()
    level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(format="%(message)s", level=level)
    logging.getLogger(LIBRARY_LOGGER).setLevel(level)
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))

    structlog.configure(
        processors=_processors(json_output),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = LIBRARY_LOGGER) -> Any:
    """Get a structlog logger; pass ``__name__`` from inside the package."""
    return structlog.get_logger(name)
