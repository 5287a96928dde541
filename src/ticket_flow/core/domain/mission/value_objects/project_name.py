from __future__ import annotations

from dataclasses import dataclass

from ticket_flow.core.domain.shared.text_guard import require_text


@dataclass(frozen=True, slots=True)
class ProjectName:
    """Name of a configured project."""

    value: str

    def __post_init__(self) -> None:
        require_text(self.value, "ProjectName.value")

    def __str__(self) -> str:
        return self.value
