from fakes import RaisingHandler, StaticHandler

from ticket_flow.core.application.pipeline import CommandExecutor, PipelineContext
from ticket_flow.core.domain.execution import Failure, fail, ok


class TestCommandExecutor:
    async def test_returns_handler_result(self) -> None:
        handler = StaticHandler(ok("fetched"))
        executor = CommandExecutor({"fetch_ticket": handler})

        result = await executor.execute("fetch_ticket", PipelineContext())

        assert result == ok("fetched")
        assert handler.calls == 1

    async def test_passes_through_handler_failure(self) -> None:
        executor = CommandExecutor()
        executor.register("test", StaticHandler(fail("tests red")))

        result = await executor.execute("test", PipelineContext())

        assert result == fail("tests red")

    async def test_unknown_command_fails_without_raising(self) -> None:
        result = await CommandExecutor().execute("missing", PipelineContext())

        assert isinstance(result, Failure)
        assert result.message == "No handler registered for missing"

    async def test_handler_exception_becomes_failure(self) -> None:
        error = RuntimeError("network down")
        executor = CommandExecutor({"checkout_source": RaisingHandler(error)})

        result = await executor.execute("checkout_source", PipelineContext())

        assert result.is_success is False
        assert result.message == "network down"
        assert result.exception is error

    def test_register_and_has_handler(self) -> None:
        executor = CommandExecutor()
        assert not executor.has_handler("plan")

        executor.register("plan", StaticHandler(ok("planned")))

        assert executor.has_handler("plan")
