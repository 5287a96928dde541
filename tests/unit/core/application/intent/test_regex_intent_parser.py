import pytest

from ticket_flow.core.application.intent import RegexIntentParser
from ticket_flow.core.domain.mission import ParsedIntent, ProjectName, TicketId
from ticket_flow.core.exceptions import ConfigurationError, InvalidArgumentError


@pytest.fixture
def parser() -> RegexIntentParser:
    return RegexIntentParser()


class TestRegexIntentParser:
    @pytest.mark.parametrize(
        ("user_input", "ticket", "project"),
        [
            ("fix #123 in todo-list", "123", "todo-list"),
            ("#34237 todo-list", "34237", "todo-list"),
            ("todo-list #123", "123", "todo-list"),
            ("fix 123 in todo-list", "123", "todo-list"),
            ("resolve ticket #42 in api", "42", "api"),
            ("#7 myproject", "7", "myproject"),
            ("JIRA-42 backend", "JIRA-42", "backend"),
            ("Fix PROJ-7 in Backend", "PROJ-7", "backend"),
            ("fix #12 in web-2", "12", "web-2"),
            ("app2 #5", "5", "app2"),
        ],
    )
    def test_parses_valid_input(
        self, parser: RegexIntentParser, user_input: str, ticket: str, project: str
    ) -> None:
        assert parser.parse(user_input) == ParsedIntent(TicketId(ticket), ProjectName(project))

    def test_hash_tokens_are_not_project_names(self, parser: RegexIntentParser) -> None:
        intent = parser.parse("fix #12 #13 in api")

        assert intent == ParsedIntent(TicketId("12"), ProjectName("api"))

    @pytest.mark.parametrize("user_input", ["no ticket here", "just some random text"])
    def test_missing_ticket_raises_configuration_error(
        self, parser: RegexIntentParser, user_input: str
    ) -> None:
        with pytest.raises(ConfigurationError, match="ticket ID"):
            parser.parse(user_input)

    def test_only_ticket_raises_for_missing_project(self, parser: RegexIntentParser) -> None:
        with pytest.raises(ConfigurationError, match="project name"):
            parser.parse("fix #123")

    @pytest.mark.parametrize("user_input", ["", "   "])
    def test_blank_input_raises_invalid_argument(
        self, parser: RegexIntentParser, user_input: str
    ) -> None:
        with pytest.raises(InvalidArgumentError):
            parser.parse(user_input)
