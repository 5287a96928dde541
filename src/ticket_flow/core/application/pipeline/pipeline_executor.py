"""Sequential pipeline runner: Progress -> Execute -> (stop on first failure) -> Report."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import structlog

from ticket_flow.core.application.pipeline.command_executor import CommandExecutor
from ticket_flow.core.application.pipeline.context_keys import ContextKey
from ticket_flow.core.application.pipeline.pipeline_context import PipelineContext
from ticket_flow.core.application.ports.progress_reporter_port import ProgressReporterPort
from ticket_flow.core.application.ports.ticket_status_port import TicketStatusPort
from ticket_flow.core.domain.execution import CommandResult, ok
from ticket_flow.core.domain.mission import TicketId

logger = structlog.get_logger()

STEP_LABELS: dict[str, str] = {
    "fetch_ticket": "Fetching ticket",
    "checkout_source": "Checking out source",
    "load_coding_principles": "Loading coding principles",
    "analyze_code": "Analyzing codebase",
    "generate_plan": "Generating plan",
    "approval": "Awaiting approval",
    "agentic_execute": "Executing plan",
    "generate_tests": "Generating tests",
    "test": "Running tests",
    "generate_docs": "Generating docs",
    "commit_and_pr": "Creating pull request",
}

PIPELINE_STARTED_STATUS = "ticket-flow is working on this issue..."
PIPELINE_COMPLETED_MESSAGE = "Pipeline completed successfully"


class PipelineExecutor:
    def __init__(
        self,
        command_executor: CommandExecutor,
        progress_reporter: ProgressReporterPort,
        ticket_status: TicketStatusPort | None = None,
        step_labels: Mapping[str, str] | None = None,
    ) -> None:
        self._command_executor = command_executor
        self._progress_reporter = progress_reporter
        self._ticket_status = ticket_status
        self._step_labels = {k.lower(): v for k, v in (step_labels or STEP_LABELS).items()}

    def label_for(self, command_name: str) -> str:
        return self._step_labels.get(command_name.lower(), command_name)

    async def execute(self, command_names: Sequence[str], context: PipelineContext) -> CommandResult:
        total = len(command_names)
        logger.info("Pipeline started", total_steps=total)
        await self._post_ticket_status(context, PIPELINE_STARTED_STATUS)

        for step, command_name in enumerate(command_names, start=1):
            label = self.label_for(command_name)
            logger.info("Pipeline step started", step=step, total_steps=total, command=command_name)
            await self._progress_reporter.report_progress(step, total, label)

            result = await self._command_executor.execute(command_name, context)
            if not result.is_success:
                return await self._halt(result, step, total, command_name, label, context)

            logger.info(
                "Pipeline step completed",
                step=step,
                total_steps=total,
                command=command_name,
                result_message=result.message,
            )

        logger.info("Pipeline completed", total_steps=total)
        return ok(PIPELINE_COMPLETED_MESSAGE)

    async def _halt(
        self,
        result: CommandResult,
        step: int,
        total: int,
        command_name: str,
        label: str,
        context: PipelineContext,
    ) -> CommandResult:
        logger.warning(
            "Pipeline stopped",
            step=step,
            total_steps=total,
            command=command_name,
            result_message=result.message,
        )
        await self._post_ticket_status(
            context,
            f"## ticket-flow - Failed\n\n**Step:** {command_name} ({step}/{total})\n"
            f"**Error:** {result.message}",
        )
        await self._progress_reporter.report_error(result.message, step, total, label)
        return result.with_step(failed_step=step, total_steps=total, step_name=label)

    async def _post_ticket_status(self, context: PipelineContext, message: str) -> None:
        """Best effort: a tracker outage must not change the pipeline outcome."""
        if self._ticket_status is None:
            return
        ticket_id = context.try_get(ContextKey.TICKET_ID, TicketId)
        if ticket_id is None:
            return
        try:
            await self._ticket_status.update_status(ticket_id, message)
        except Exception as exc:  # noqa: BLE001
            logger.warning(
                "Failed to post status update to ticket",
                ticket_id=str(ticket_id),
                error_type=type(exc).__name__,
                error_details=str(exc),
            )
