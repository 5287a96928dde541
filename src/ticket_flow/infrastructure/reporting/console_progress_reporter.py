from __future__ import annotations

from collections.abc import Callable

import structlog

from ticket_flow.core.application.ports.progress_reporter_port import ProgressReporterPort

logger = structlog.get_logger()

_YES = ("y", "yes")
_NO = ("n", "no")


class ConsoleProgressReporter(ProgressReporterPort):
    """Progress reporter for local runs.

    Progress goes to the log; questions are read from ``input_fn``. In headless
    mode every question is answered with its default.
    """

    def __init__(self, headless: bool = False, input_fn: Callable[[str], str] = input) -> None:
        self._headless = headless
        self._input_fn = input_fn

    async def report_progress(self, step: int, total: int, command_name: str) -> None:
        logger.info(f"[{step}/{total}] {command_name}...", step=step, total_steps=total)

    async def ask_yes_no(self, question_id: str, text: str, default_answer: bool = True) -> bool:
        if self._headless:
            logger.info(
                "Headless mode: auto-answering question",
                question_id=question_id,
                answer="yes" if default_answer else "no",
            )
            return default_answer

        prompt = f"\n{text}\nAnswer (y/n) [{'y' if default_answer else 'n'}]: "
        try:
            raw = self._input_fn(prompt)
        except EOFError:
            return default_answer

        answer = (raw or "").strip().lower()
        if answer in _YES:
            return True
        if answer in _NO:
            return False
        return default_answer

    async def report_done(self, summary: str, pr_url: str | None = None) -> None:
        logger.info(f"Done: {summary}")
        if pr_url and pr_url.strip():
            logger.info(f"Pull Request: {pr_url}")

    async def report_error(
        self, text: str, step: int = 0, total: int = 0, step_name: str = ""
    ) -> None:
        if step > 0:
            logger.error(f"Error at [{step}/{total}] {step_name}: {text}")
        else:
            logger.error(f"Error: {text}")

    async def report_detail(self, text: str) -> None:
        logger.debug(f"  [detail] {text}")
