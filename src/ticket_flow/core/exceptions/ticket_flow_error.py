from __future__ import annotations


class TicketFlowError(Exception):
    """Base class for all ticket-flow errors."""
