from __future__ import annotations

import structlog

from ticket_flow.core.application.pipeline.context_keys import ContextKey
from ticket_flow.core.application.pipeline.pipeline_context import PipelineContext
from ticket_flow.core.application.ports.progress_reporter_port import ProgressReporterPort
from ticket_flow.core.domain.execution import CommandResult, fail, ok

logger = structlog.get_logger()

APPROVAL_QUESTION_ID = "approve_plan"


class ApprovalHandler:
    """Shows the current plan, if any, and asks the user to approve it."""

    def __init__(self, progress_reporter: ProgressReporterPort) -> None:
        self._progress_reporter = progress_reporter

    async def execute(self, context: PipelineContext) -> CommandResult:
        plan = context.try_get(ContextKey.PLAN)
        if plan is not None:
            logger.info("Plan awaiting approval", plan=str(plan))
            await self._progress_reporter.report_detail(f"Plan: {plan}")

        approved = await self._progress_reporter.ask_yes_no(
            APPROVAL_QUESTION_ID, "Approve this plan? (y/n)"
        )
        context.set(ContextKey.APPROVED, approved)

        if not approved:
            return fail("Plan rejected by user")
        return ok("Plan approved by user")
