from pathlib import Path

import pytest

VALID_CONFIG = """
projects:
  todo-list:
    pipeline: fix-bug
    source:
      type: GitHub
      url: https://github.com/test/repo
      auth: token
    tickets:
      type: Jira
      url: https://jira.example.com
      auth: token
  backend:
    pipeline: fix-bug
    branch_prefix: feature
  orphan:
    pipeline: does-not-exist
pipelines:
  fix-bug:
    commands:
      - fetch_ticket
      - checkout_source
      - commit_and_pr
secrets:
  github_token: ${TICKET_FLOW_TEST_TOKEN}
  plain: literal-value
"""


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "ticket-flow.yml"
    path.write_text(VALID_CONFIG, encoding="utf-8")
    return path
