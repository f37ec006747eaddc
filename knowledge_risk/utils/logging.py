"""
Structured logging configuration using structlog.

Engine components log through module-level ``structlog.get_logger()``
instances; nothing is emitted in a useful shape until configure_logging
has been called once by the embedding application.

Event names are snake_case (``departure_simulated``, ``layout_computed``,
``snapshot_replaced``). Context travels as keyword fields, never inside
the event string.
"""

import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import EventDict, Processor

from knowledge_risk.config import get_settings


def add_severity(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add severity level for structured logging."""
    event_dict["severity"] = method_name.upper()
    return event_dict


def build_processors(log_format: str) -> list[Processor]:
    """
    Processor chain ending in the renderer for ``log_format``.

    Args:
        log_format: "json" for one JSON object per line, "console" otherwise

    Returns:
        Ordered structlog processors
    """
    if log_format == "json":
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())

    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        add_severity,
        structlog.processors.UnicodeDecoder(),
        renderer,
    ]


def configure_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
) -> None:
    """
    Configure structured logging for the engine.

    Args:
        log_level: Overrides settings.log_level
        log_format: Overrides settings.log_format ("json" or "console");
            development mode always renders to the console
    """
    settings = get_settings()
    level_name = (log_level or settings.log_level).upper()
    fmt = log_format or ("console" if settings.dev_mode else settings.log_format)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level_name, logging.INFO),
        force=True,
    )

    structlog.configure(
        processors=build_processors(fmt),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=not settings.testing,
    )
