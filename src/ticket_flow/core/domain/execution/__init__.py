from ticket_flow.core.domain.execution.command_result import (
    CommandResult,
    Failure,
    Success,
    fail,
    ok,
)

__all__ = ["CommandResult", "Failure", "Success", "fail", "ok"]
