"""Process-wide logging setup for ticket-flow.

structlog events and records from stdlib loggers share one processor chain, so
both come out in the same shape: a nested JSON document when running in a
deployed environment, coloured key/value lines on a developer console.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

from ticket_flow.infrastructure.observability.logging.log_schema_processor import (
    log_schema_processor,
)

JSON_ENVIRONMENTS = frozenset({"qa", "staging", "prod", "production"})

_CONFIGURED = False


def configure_logging(log_level: str = "INFO") -> None:
    """Install the ticket-flow processor chain; calls after the first are ignored.

    ``LOG_FORMAT=json|console`` forces a renderer. Without it, ``APP_ENV`` values in
    ``JSON_ENVIRONMENTS`` get JSON and everything else gets the console renderer.
    """
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED:
        return
    _CONFIGURED = True

    level = _level_number(log_level)
    json_output = _wants_json(os.environ)
    renderer: Any = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
    )

    chain: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if json_output:
        chain.extend((structlog.processors.format_exc_info, log_schema_processor))

    structlog.configure(
        processors=[*chain, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _install_stdlib_handler(chain, renderer, level)


def _install_stdlib_handler(chain: list[Any], renderer: Any, level: int) -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *chain, renderer],
        )
    )
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level)


def _level_number(log_level: str) -> int:
    return logging.getLevelNamesMapping().get(log_level.upper(), logging.INFO)


def _wants_json(environ: Any) -> bool:
    log_format = environ.get("LOG_FORMAT", "").strip().lower()
    if log_format in ("json", "console"):
        return log_format == "json"
    return environ.get("APP_ENV", "local").strip().lower() in JSON_ENVIRONMENTS
