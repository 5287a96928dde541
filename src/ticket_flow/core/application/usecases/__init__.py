from ticket_flow.core.application.usecases.process_ticket_usecase import ProcessTicketUseCase

__all__ = ["ProcessTicketUseCase"]
