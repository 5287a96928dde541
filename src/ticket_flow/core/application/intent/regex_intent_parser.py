"""Parses free-form requests into a ticket id and a project name.

Supported shapes include ``"fix #123 in todo-list"``, ``"#123 todo-list"``,
``"todo-list #123"`` and tracker keys such as ``"JIRA-42 backend"``.
"""

from __future__ import annotations

import re

import structlog

from ticket_flow.core.domain.mission import ParsedIntent, ProjectName, TicketId
from ticket_flow.core.domain.shared.text_guard import require_text
from ticket_flow.core.exceptions import ConfigurationError

logger = structlog.get_logger()

NOISE_WORDS = frozenset(
    {"fix", "resolve", "close", "implement", "add", "update", "ticket", "issue", "in", "for"}
)

# Tried in order: explicit "#123", tracker key "ABC-123", standalone number, any digits.
_TICKET_PATTERNS = (
    re.compile(r"#(\d+)"),
    re.compile(r"(?<![\w-])([A-Za-z][A-Za-z0-9]*-\d+)(?![\w-])"),
    re.compile(r"(?<![\w-])(\d+)(?![\w-])"),
    re.compile(r"(\d+)"),
)


class RegexIntentParser:
    def parse(self, user_input: str) -> ParsedIntent:
        require_text(user_input, "user_input")

        ticket_id, remainder = self._extract_ticket_id(user_input)
        project_name = self._extract_project_name(remainder, user_input)

        logger.info("Parsed intent", ticket_id=ticket_id, project=project_name)
        return ParsedIntent(TicketId(ticket_id), ProjectName(project_name))

    @staticmethod
    def _extract_ticket_id(user_input: str) -> tuple[str, str]:
        """Return the ticket id and the input with the ticket token removed."""
        for pattern in _TICKET_PATTERNS:
            match = pattern.search(user_input)
            if match:
                remainder = user_input[: match.start()] + " " + user_input[match.end() :]
                return match.group(1), remainder
        raise ConfigurationError(f"Could not extract ticket ID from input: '{user_input}'")

    @staticmethod
    def _extract_project_name(remainder: str, user_input: str) -> str:
        words = [
            w
            for w in remainder.split()
            if w.lower() not in NOISE_WORDS and not w.startswith("#")
        ]
        if not words:
            raise ConfigurationError(f"Could not extract project name from input: '{user_input}'")
        return words[0].lower()
