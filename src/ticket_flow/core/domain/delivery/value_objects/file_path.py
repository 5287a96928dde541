from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath, PureWindowsPath

from ticket_flow.core.domain.shared.text_guard import require_text
from ticket_flow.core.exceptions.invalid_argument_error import InvalidArgumentError


@dataclass(frozen=True, slots=True)
class FilePath:
    """Relative file path inside a repository. Never absolute, never traverses upward."""

    value: str

    def __post_init__(self) -> None:
        require_text(self.value, "FilePath.value")
        if PurePosixPath(self.value).is_absolute() or PureWindowsPath(self.value).is_absolute():
            raise InvalidArgumentError(f"File path must be relative: '{self.value}'")
        if ".." in self.value:
            raise InvalidArgumentError(f"File path must not contain parent traversal: '{self.value}'")

    def __str__(self) -> str:
        return self.value
