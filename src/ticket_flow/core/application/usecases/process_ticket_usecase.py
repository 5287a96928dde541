from __future__ import annotations

from pathlib import Path

import structlog
from structlog.contextvars import bound_contextvars

from ticket_flow.configuration.project_config import PipelineConfig, ProjectConfig, TicketFlowConfig
from ticket_flow.core.application.intent.regex_intent_parser import RegexIntentParser
from ticket_flow.core.application.pipeline.context_keys import ContextKey
from ticket_flow.core.application.pipeline.pipeline_context import PipelineContext
from ticket_flow.core.application.pipeline.pipeline_executor import PipelineExecutor
from ticket_flow.core.application.ports.progress_reporter_port import ProgressReporterPort
from ticket_flow.core.domain.delivery import DEFAULT_BRANCH_PREFIX, BranchName
from ticket_flow.core.domain.execution import CommandResult
from ticket_flow.core.domain.mission import ParsedIntent
from ticket_flow.core.exceptions import ConfigurationError
from ticket_flow.infrastructure.configuration.yaml_config_loader import YamlConfigLoader

logger = structlog.get_logger()


class ProcessTicketUseCase:
    """Entry point: Load config -> Parse intent -> Resolve pipeline -> Run -> Report."""

    def __init__(
        self,
        config_loader: YamlConfigLoader,
        intent_parser: RegexIntentParser,
        pipeline_executor: PipelineExecutor,
        progress_reporter: ProgressReporterPort,
        default_branch_prefix: str = DEFAULT_BRANCH_PREFIX,
    ) -> None:
        self._config_loader = config_loader
        self._intent_parser = intent_parser
        self._pipeline_executor = pipeline_executor
        self._progress_reporter = progress_reporter
        self._default_branch_prefix = default_branch_prefix

    async def execute(self, user_input: str, config_path: str | Path) -> CommandResult:
        logger.info("Processing input", user_input=user_input)

        config = self._config_loader.load(config_path)
        intent = self._intent_parser.parse(user_input)
        project, pipeline_name, pipeline = self._resolve_pipeline(config, intent)

        with bound_contextvars(ticket_id=str(intent.ticket_id), project=str(intent.project_name)):
            branch = BranchName.from_ticket(
                intent.ticket_id, project.branch_prefix or self._default_branch_prefix
            )
            logger.info("Running pipeline", pipeline=pipeline_name, branch=str(branch))

            context = PipelineContext()
            context.set(ContextKey.TICKET_ID, intent.ticket_id)
            context.set(ContextKey.BRANCH_NAME, branch)
            context.set(ContextKey.PROJECT_CONFIG, project)

            result = await self._pipeline_executor.execute(pipeline.commands, context)
            await self._report(result, context)
            return result

    @staticmethod
    def _resolve_pipeline(
        config: TicketFlowConfig, intent: ParsedIntent
    ) -> tuple[ProjectConfig, str, PipelineConfig]:
        project_name = str(intent.project_name)
        project = config.projects.get(project_name)
        if project is None:
            raise ConfigurationError(f"Project '{project_name}' not found in configuration.")

        pipeline = config.pipelines.get(project.pipeline)
        if pipeline is None:
            raise ConfigurationError(f"Pipeline '{project.pipeline}' not found in configuration.")
        return project, project.pipeline, pipeline

    async def _report(self, result: CommandResult, context: PipelineContext) -> None:
        if result.is_success:
            logger.info("Ticket processed successfully", result_message=result.message)
            pr_url = context.try_get(ContextKey.PULL_REQUEST_URL, str)
            await self._progress_reporter.report_done(result.message, pr_url)
        else:
            logger.warning(
                "Ticket processing failed",
                result_message=result.message,
                step=result.failed_step,
                total_steps=result.total_steps,
            )
