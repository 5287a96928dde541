from __future__ import annotations

from enum import Enum


class ContextKey(str, Enum):
    """Well-known keys of the pipeline context."""

    TICKET_ID = "ticket_id"
    TICKET = "ticket"
    REPOSITORY = "repository"
    BRANCH_NAME = "branch_name"
    PLAN = "plan"
    CODE_CHANGES = "code_changes"
    CODE_ANALYSIS = "code_analysis"
    CODING_PRINCIPLES = "coding_principles"
    APPROVED = "approved"
    TEST_RESULTS = "test_results"
    PULL_REQUEST_URL = "pull_request_url"
    PROJECT_CONFIG = "project_config"
