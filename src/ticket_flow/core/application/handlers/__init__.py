from ticket_flow.core.application.handlers.approval_handler import (
    APPROVAL_QUESTION_ID,
    ApprovalHandler,
)
from ticket_flow.core.application.handlers.load_coding_principles_handler import (
    DEFAULT_CODING_PRINCIPLES_PATH,
    LoadCodingPrinciplesHandler,
)

__all__ = [
    "APPROVAL_QUESTION_ID",
    "DEFAULT_CODING_PRINCIPLES_PATH",
    "ApprovalHandler",
    "LoadCodingPrinciplesHandler",
]
