from ticket_flow.core.domain.delivery.value_objects.branch_name import (
    DEFAULT_BRANCH_PREFIX,
    BranchName,
)
from ticket_flow.core.domain.delivery.value_objects.file_path import FilePath

__all__ = ["DEFAULT_BRANCH_PREFIX", "BranchName", "FilePath"]
