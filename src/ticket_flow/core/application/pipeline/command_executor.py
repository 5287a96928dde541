from __future__ import annotations

import structlog

from ticket_flow.core.application.pipeline.pipeline_context import PipelineContext
from ticket_flow.core.application.ports.command_handler import CommandHandler
from ticket_flow.core.domain.execution import CommandResult, fail

logger = structlog.get_logger()


class CommandExecutor:
    """Resolves handlers by command name and runs them.

    Handler exceptions never escape: they are turned into failed results here.
    """

    def __init__(self, handlers: dict[str, CommandHandler] | None = None) -> None:
        self._handlers: dict[str, CommandHandler] = dict(handlers or {})

    def register(self, command_name: str, handler: CommandHandler) -> None:
        self._handlers[command_name] = handler

    def has_handler(self, command_name: str) -> bool:
        return command_name in self._handlers

    async def execute(self, command_name: str, context: PipelineContext) -> CommandResult:
        logger.info("Executing command", command=command_name)
        handler = self._handlers.get(command_name)
        if handler is None:
            return fail(f"No handler registered for {command_name}")

        try:
            result = await handler.execute(context)
        except Exception as exc:
            logger.exception(
                "Command handler raised",
                command=command_name,
                error_type=type(exc).__name__,
                error_details=str(exc),
            )
            return fail(str(exc), exc)

        if result.is_success:
            logger.info("Command completed", command=command_name, result_message=result.message)
        else:
            logger.warning("Command failed", command=command_name, result_message=result.message)
        return result
