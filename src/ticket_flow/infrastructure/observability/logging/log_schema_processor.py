"""Structlog processor that nests flat event fields into the ticket-flow log schema.

Root fields (timestamp, level, service, environment, message) stay at the top;
``error_*`` fields become an ``error`` block, ``context_*`` fields a ``context``
block and pipeline fields (ticket, project, step) a ``pipeline`` block. Anything
left over lands in ``extra``. All extraction uses ``dict.pop(key, default)``.
"""

from __future__ import annotations

import os
from typing import Any


def _build_root_fields(event_dict: dict[str, Any]) -> dict[str, Any]:
    return {
        "timestamp": event_dict.pop("timestamp", None),
        "level": event_dict.pop("level", "info"),
        "service": os.environ.get("SERVICE_NAME", "ticket-flow"),
        "environment": os.environ.get("APP_ENV", "local"),
        "correlation_id": event_dict.pop("correlation_id", None),
        "message": event_dict.pop("event", ""),
    }


def _build_error(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Returns None if no error_type present."""
    error_type = event_dict.pop("error_type", None)
    if error_type is None:
        return None
    return {
        "type": error_type,
        "details": event_dict.pop("error_details", None),
        "exception": event_dict.pop("exception", None),
    }


def _build_pipeline(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    keys = ("ticket_id", "project", "command", "step", "total_steps")
    if not any(k in event_dict for k in keys):
        return None
    return {k: event_dict.pop(k, None) for k in keys}


def _build_context(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    component = event_dict.pop("context_component", None)
    if component is None:
        return None
    return {"component": component}


def log_schema_processor(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    result = _build_root_fields(event_dict)

    error = _build_error(event_dict)
    if error is not None:
        result["error"] = error

    pipeline = _build_pipeline(event_dict)
    if pipeline is not None:
        result["pipeline"] = pipeline

    context = _build_context(event_dict)
    if context is not None:
        result["context"] = context

    if event_dict:
        result["extra"] = dict(event_dict)

    return result
