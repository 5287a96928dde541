from __future__ import annotations

from typing import TYPE_CHECKING

from ticket_flow.core.exceptions.ticket_flow_error import TicketFlowError

if TYPE_CHECKING:
    from ticket_flow.core.domain.mission.value_objects.ticket_id import TicketId


class TicketNotFoundError(TicketFlowError):
    def __init__(self, ticket_id: TicketId) -> None:
        super().__init__(f"Ticket '{ticket_id}' not found.")
        self.ticket_id = ticket_id
