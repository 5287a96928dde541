from __future__ import annotations

from dataclasses import dataclass

from ticket_flow.core.domain.shared.text_guard import require_text


@dataclass(frozen=True, slots=True)
class TicketId:
    """Identifier of a ticket in any tracker (``123``, ``JIRA-42``)."""

    value: str

    def __post_init__(self) -> None:
        require_text(self.value, "TicketId.value")

    def __str__(self) -> str:
        return self.value
