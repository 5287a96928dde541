from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from ticket_flow.core.domain.execution import CommandResult

if TYPE_CHECKING:
    from ticket_flow.core.application.pipeline.pipeline_context import PipelineContext


class CommandHandler(Protocol):
    """One pipeline command. Reads from and writes to the shared pipeline context."""

    async def execute(self, context: PipelineContext) -> CommandResult: ...
