from __future__ import annotations

from ticket_flow.core.exceptions.ticket_flow_error import TicketFlowError


class ConfigurationError(TicketFlowError):
    """Raised when configuration or user input cannot be resolved."""
