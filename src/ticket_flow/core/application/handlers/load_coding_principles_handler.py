from __future__ import annotations

from pathlib import Path

import structlog

from ticket_flow.configuration.project_config import ProjectConfig
from ticket_flow.core.application.pipeline.context_keys import ContextKey
from ticket_flow.core.application.pipeline.pipeline_context import PipelineContext
from ticket_flow.core.domain.delivery import FilePath
from ticket_flow.core.domain.execution import CommandResult, fail, ok

logger = structlog.get_logger()

DEFAULT_CODING_PRINCIPLES_PATH = "config/coding-principles.md"


class LoadCodingPrinciplesHandler:
    """Reads the project's coding principles document into the pipeline context.

    The document path comes from ``coding_principles_path`` of the project config and
    is resolved against ``base_dir`` (the working directory when not given).
    """

    def __init__(self, base_dir: Path | None = None) -> None:
        self._base_dir = base_dir

    async def execute(self, context: PipelineContext) -> CommandResult:
        path = self._resolve_path(context.try_get(ContextKey.PROJECT_CONFIG, ProjectConfig))
        logger.info("Loading coding principles", path=str(path))

        if not path.is_file():
            return fail(f"Coding principles file not found: {path}")

        content = path.read_text(encoding="utf-8")
        context.set(ContextKey.CODING_PRINCIPLES, content)
        return ok(f"Loaded coding principles ({len(content)} chars)")

    def _resolve_path(self, project: ProjectConfig | None) -> Path:
        configured = project.coding_principles_path if project else None
        relative = FilePath(configured or DEFAULT_CODING_PRINCIPLES_PATH)
        return (self._base_dir or Path.cwd()) / relative.value
