"""structlog helpers for the REST client.

The library only ever asks structlog for loggers; it never configures
structlog on import. Applications that want this package's output format opt
in once at startup:

    from discord_rest.config import Settings
    from discord_rest.log import setup_logging

    setup_logging(Settings())
"""

from __future__ import annotations

import logging
import sys
from collections.abc import MutableMapping
from typing import Any

import structlog

from discord_rest.config import Settings

# Keys left at the top level of a log event; everything else goes under "context".
TOP_LEVEL_KEYS = frozenset({"timestamp", "level", "service", "msg", "context"})


def _nest_context(_logger: Any, _method_name: str, event_dict: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    """Rename ``event`` to ``msg`` and move request fields (channel_id, ...) under ``context``."""
    if "event" in event_dict and "msg" not in event_dict:
        event_dict["msg"] = event_dict.pop("event")

    context = event_dict.pop("context", None)
    if not isinstance(context, dict):
        context = {} if context is None else {"value": context}
    for key in [k for k in event_dict if k not in TOP_LEVEL_KEYS]:
        context[key] = event_dict.pop(key)

    event_dict["context"] = context
    return event_dict


def _wants_json(log_format: str) -> bool:
    log_format = log_format.lower()
    if log_format == "auto":
        return not sys.stdout.isatty()
    return log_format == "json"


def setup_logging(settings: Settings | None = None) -> None:
    """Configure structlog from ``log_level`` and ``log_format`` in ``settings``."""
    settings = settings or Settings()
    renderer = (
        structlog.processors.JSONRenderer()
        if _wants_json(settings.log_format)
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", key="timestamp"),
            _nest_context,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, settings.log_level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )


def get_logger(component: str) -> Any:
    """Lazy structlog logger bound with the component name."""
    return structlog.get_logger(service=component)
