from abc import ABC, abstractmethod

from ticket_flow.core.domain.mission import TicketId


class TicketStatusPort(ABC):
    @abstractmethod
    async def update_status(self, ticket_id: TicketId, message: str) -> None:
        pass
