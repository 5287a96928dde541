from ticket_flow.core.application.ports.command_handler import CommandHandler
from ticket_flow.core.application.ports.progress_reporter_port import ProgressReporterPort
from ticket_flow.core.application.ports.ticket_status_port import TicketStatusPort

__all__ = ["CommandHandler", "ProgressReporterPort", "TicketStatusPort"]
