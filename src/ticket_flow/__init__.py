from ticket_flow.core.domain.delivery import BranchName, FilePath
from ticket_flow.core.domain.execution import CommandResult, Failure, Success, fail, ok
from ticket_flow.core.domain.mission import ParsedIntent, ProjectName, TicketId

__all__ = [
    "BranchName",
    "CommandResult",
    "Failure",
    "FilePath",
    "ParsedIntent",
    "ProjectName",
    "Success",
    "TicketId",
    "fail",
    "ok",
]
