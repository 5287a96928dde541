from ticket_flow.core.domain.mission.value_objects.parsed_intent import ParsedIntent
from ticket_flow.core.domain.mission.value_objects.project_name import ProjectName
from ticket_flow.core.domain.mission.value_objects.ticket_id import TicketId

__all__ = ["ParsedIntent", "ProjectName", "TicketId"]
