from collections.abc import Mapping

from ticket_flow.configuration.app_settings import AppSettings
from ticket_flow.core.application.handlers import ApprovalHandler, LoadCodingPrinciplesHandler
from ticket_flow.core.application.intent.regex_intent_parser import RegexIntentParser
from ticket_flow.core.application.pipeline.command_executor import CommandExecutor
from ticket_flow.core.application.pipeline.pipeline_executor import PipelineExecutor
from ticket_flow.core.application.ports.command_handler import CommandHandler
from ticket_flow.core.application.ports.progress_reporter_port import ProgressReporterPort
from ticket_flow.core.application.ports.ticket_status_port import TicketStatusPort
from ticket_flow.core.application.usecases.process_ticket_usecase import ProcessTicketUseCase
from ticket_flow.infrastructure.configuration.yaml_config_loader import YamlConfigLoader
from ticket_flow.infrastructure.observability.logger_factory_service import configure_logging
from ticket_flow.infrastructure.reporting.console_progress_reporter import ConsoleProgressReporter


def _builtin_handlers(reporter: ProgressReporterPort) -> dict[str, CommandHandler]:
    return {
        "load_coding_principles": LoadCodingPrinciplesHandler(),
        "approval": ApprovalHandler(reporter),
    }


def build_process_ticket_usecase(
    handlers: Mapping[str, CommandHandler],
    settings: AppSettings | None = None,
    ticket_status: TicketStatusPort | None = None,
    progress_reporter: ProgressReporterPort | None = None,
) -> ProcessTicketUseCase:
    """Wire the ticket use case from settings and the command handlers the caller provides.

    ``load_coding_principles`` and ``approval`` are registered by default; a caller
    handler with the same name replaces the built-in one.
    """
    settings = settings or AppSettings()
    configure_logging(settings.log_level)

    reporter = progress_reporter or ConsoleProgressReporter(headless=settings.headless)
    pipeline_executor = PipelineExecutor(
        command_executor=CommandExecutor({**_builtin_handlers(reporter), **handlers}),
        progress_reporter=reporter,
        ticket_status=ticket_status,
    )
    return ProcessTicketUseCase(
        config_loader=YamlConfigLoader(),
        intent_parser=RegexIntentParser(),
        pipeline_executor=pipeline_executor,
        progress_reporter=reporter,
        default_branch_prefix=settings.default_branch_prefix,
    )
