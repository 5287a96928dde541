from __future__ import annotations

from ticket_flow.core.exceptions.invalid_argument_error import InvalidArgumentError


def require_text(value: str, field_name: str) -> None:
    """Reject None, empty and whitespace-only strings."""
    if value is None or not str(value).strip():
        raise InvalidArgumentError(f"{field_name} must be a non-empty, non-whitespace string")
