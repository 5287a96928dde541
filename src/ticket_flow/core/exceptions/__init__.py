from ticket_flow.core.exceptions.configuration_error import ConfigurationError
from ticket_flow.core.exceptions.invalid_argument_error import InvalidArgumentError
from ticket_flow.core.exceptions.provider_error import ProviderError
from ticket_flow.core.exceptions.ticket_flow_error import TicketFlowError
from ticket_flow.core.exceptions.ticket_not_found_error import TicketNotFoundError

__all__ = [
    "ConfigurationError",
    "InvalidArgumentError",
    "ProviderError",
    "TicketFlowError",
    "TicketNotFoundError",
]
