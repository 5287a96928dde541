from __future__ import annotations

from dataclasses import dataclass

from ticket_flow.core.domain.mission.value_objects.ticket_id import TicketId
from ticket_flow.core.domain.shared.text_guard import require_text

DEFAULT_BRANCH_PREFIX = "fix"


@dataclass(frozen=True, slots=True)
class BranchName:
    """Git branch name. The value is stored exactly as given."""

    value: str

    def __post_init__(self) -> None:
        require_text(self.value, "BranchName.value")

    @classmethod
    def from_ticket(cls, ticket_id: TicketId, prefix: str = DEFAULT_BRANCH_PREFIX) -> BranchName:
        return cls(f"{prefix}/{ticket_id}")

    def __str__(self) -> str:
        return self.value
