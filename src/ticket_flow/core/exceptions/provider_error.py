from __future__ import annotations

from ticket_flow.core.exceptions.ticket_flow_error import TicketFlowError


class ProviderError(TicketFlowError):
    """Raised when an external provider fails while serving a pipeline step."""

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(message)
        self.provider = provider
        self.message = message

    def __str__(self) -> str:
        return f"{self.provider}: {self.message}"
