from abc import ABC, abstractmethod


class ProgressReporterPort(ABC):
    """Reports pipeline progress and asks interactive questions while a pipeline runs."""

    @abstractmethod
    async def report_progress(self, step: int, total: int, command_name: str) -> None:
        pass

    @abstractmethod
    async def ask_yes_no(self, question_id: str, text: str, default_answer: bool = True) -> bool:
        """Ask a yes/no question. Headless implementations return ``default_answer``."""

    @abstractmethod
    async def report_done(self, summary: str, pr_url: str | None = None) -> None:
        pass

    @abstractmethod
    async def report_error(
        self, text: str, step: int = 0, total: int = 0, step_name: str = ""
    ) -> None:
        pass

    @abstractmethod
    async def report_detail(self, text: str) -> None:
        pass
