from ticket_flow.core.application.pipeline.command_executor import CommandExecutor
from ticket_flow.core.application.pipeline.context_keys import ContextKey
from ticket_flow.core.application.pipeline.pipeline_context import PipelineContext
from ticket_flow.core.application.pipeline.pipeline_executor import STEP_LABELS, PipelineExecutor

__all__ = ["STEP_LABELS", "CommandExecutor", "ContextKey", "PipelineContext", "PipelineExecutor"]
