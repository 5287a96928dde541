from __future__ import annotations

from ticket_flow.core.exceptions.ticket_flow_error import TicketFlowError


class InvalidArgumentError(TicketFlowError, ValueError):
    """Raised when a value object is constructed from an invalid argument."""
