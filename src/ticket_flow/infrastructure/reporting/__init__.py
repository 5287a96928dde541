from ticket_flow.infrastructure.reporting.console_progress_reporter import ConsoleProgressReporter

__all__ = ["ConsoleProgressReporter"]
