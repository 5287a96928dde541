import pytest

from ticket_flow.core.application.pipeline import ContextKey, PipelineContext
from ticket_flow.core.domain.mission import TicketId
from ticket_flow.core.exceptions import InvalidArgumentError


class TestPipelineContext:
    def test_set_then_get(self) -> None:
        context = PipelineContext()
        context.set(ContextKey.TICKET_ID, TicketId("42"))

        assert context.get(ContextKey.TICKET_ID) == TicketId("42")
        assert context.has(ContextKey.TICKET_ID)

    def test_enum_and_string_keys_are_interchangeable(self) -> None:
        context = PipelineContext()
        context.set(ContextKey.APPROVED, True)

        assert context.get("approved") is True

    def test_get_missing_key_raises(self) -> None:
        with pytest.raises(KeyError, match="not found"):
            PipelineContext().get(ContextKey.PLAN)

    def test_try_get_returns_none_when_missing(self) -> None:
        assert PipelineContext().try_get(ContextKey.PLAN) is None

    def test_try_get_checks_type(self) -> None:
        context = PipelineContext()
        context.set(ContextKey.PULL_REQUEST_URL, "https://example.com/pr/1")

        assert context.try_get(ContextKey.PULL_REQUEST_URL, str) == "https://example.com/pr/1"
        assert context.try_get(ContextKey.PULL_REQUEST_URL, TicketId) is None

    def test_set_rejects_none(self) -> None:
        with pytest.raises(InvalidArgumentError, match="must not be None"):
            PipelineContext().set(ContextKey.PLAN, None)
