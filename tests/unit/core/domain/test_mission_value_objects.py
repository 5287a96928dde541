import pytest

from ticket_flow.core.domain.mission import ParsedIntent, ProjectName, TicketId
from ticket_flow.core.exceptions import InvalidArgumentError


class TestTicketIdAndProjectName:
    @pytest.mark.parametrize("factory", [TicketId, ProjectName])
    @pytest.mark.parametrize("value", ["", "   "])
    def test_reject_blank_values(self, factory, value: str) -> None:
        with pytest.raises(InvalidArgumentError):
            factory(value)

    def test_string_form_is_the_value(self) -> None:
        assert str(TicketId("JIRA-42")) == "JIRA-42"
        assert str(ProjectName("backend")) == "backend"

    def test_structural_equality_and_hashing(self) -> None:
        assert TicketId("1") == TicketId("1")
        assert {ProjectName("api"), ProjectName("api")} == {ProjectName("api")}


class TestParsedIntent:
    def test_holds_both_fields(self) -> None:
        intent = ParsedIntent(TicketId("JIRA-42"), ProjectName("backend"))

        assert intent.ticket_id == TicketId("JIRA-42")
        assert intent.project_name == ProjectName("backend")

    def test_equal_when_fields_are_equal(self) -> None:
        left = ParsedIntent(TicketId("42"), ProjectName("api"))
        right = ParsedIntent(TicketId("42"), ProjectName("api"))

        assert left == right
        assert hash(left) == hash(right)

    @pytest.mark.parametrize(
        "other",
        [
            ParsedIntent(TicketId("43"), ProjectName("api")),
            ParsedIntent(TicketId("42"), ProjectName("web")),
        ],
    )
    def test_unequal_when_any_field_differs(self, other: ParsedIntent) -> None:
        assert ParsedIntent(TicketId("42"), ProjectName("api")) != other
