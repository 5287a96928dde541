from __future__ import annotations

from typing import Any, TypeVar

from ticket_flow.core.exceptions import InvalidArgumentError

T = TypeVar("T")


class PipelineContext:
    """Shared state bag passed between pipeline steps."""

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}

    def set(self, key: str, value: Any) -> None:
        if value is None:
            raise InvalidArgumentError(f"Pipeline context value for '{key}' must not be None")
        self._data[key] = value

    def get(self, key: str) -> Any:
        try:
            return self._data[key]
        except KeyError:
            raise KeyError(f"Key '{key}' not found in pipeline context.") from None

    def try_get(self, key: str, expected_type: type[T] | None = None) -> T | Any | None:
        """Return the value for ``key``, or None when missing or not an ``expected_type``."""
        value = self._data.get(key)
        if value is None:
            return None
        if expected_type is not None and not isinstance(value, expected_type):
            return None
        return value

    def has(self, key: str) -> bool:
        return key in self._data
