from ticket_flow.configuration.app_settings import AppSettings
from ticket_flow.configuration.project_config import (
    PipelineConfig,
    ProjectConfig,
    SourceConfig,
    TicketConfig,
    TicketFlowConfig,
)

__all__ = [
    "AppSettings",
    "PipelineConfig",
    "ProjectConfig",
    "SourceConfig",
    "TicketConfig",
    "TicketFlowConfig",
]
