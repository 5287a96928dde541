from __future__ import annotations

from dataclasses import dataclass

from ticket_flow.core.domain.mission.value_objects.project_name import ProjectName
from ticket_flow.core.domain.mission.value_objects.ticket_id import TicketId


@dataclass(frozen=True, slots=True)
class ParsedIntent:
    """Result of parsing user input into a ticket reference and a project name."""

    ticket_id: TicketId
    project_name: ProjectName
