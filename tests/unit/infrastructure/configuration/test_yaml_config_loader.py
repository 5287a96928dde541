from pathlib import Path

import pytest

from ticket_flow.core.exceptions import ConfigurationError
from ticket_flow.infrastructure.configuration import YamlConfigLoader


class TestYamlConfigLoader:
    def test_loads_projects_and_pipelines(self, config_file: Path) -> None:
        config = YamlConfigLoader().load(config_file)

        assert set(config.projects) == {"todo-list", "backend", "orphan"}
        assert config.pipelines["fix-bug"].commands == [
            "fetch_ticket",
            "checkout_source",
            "commit_and_pr",
        ]

    def test_maps_project_fields(self, config_file: Path) -> None:
        project = YamlConfigLoader().load(config_file).projects["todo-list"]

        assert project.pipeline == "fix-bug"
        assert project.branch_prefix is None
        assert project.source.type == "GitHub"
        assert project.source.url == "https://github.com/test/repo"
        assert project.tickets.type == "Jira"

    def test_resolves_env_placeholders_in_secrets(
        self, config_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TICKET_FLOW_TEST_TOKEN", "test-token-123")

        config = YamlConfigLoader().load(config_file)

        assert config.secrets["github_token"] == "test-token-123"
        assert config.secrets["plain"] == "literal-value"

    def test_missing_env_placeholder_resolves_to_empty(
        self, config_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("TICKET_FLOW_TEST_TOKEN", raising=False)

        assert YamlConfigLoader().load(config_file).secrets["github_token"] == ""

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="not found"):
            YamlConfigLoader().load(tmp_path / "nonexistent.yml")

    def test_malformed_yaml_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.yml"
        path.write_text("projects: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            YamlConfigLoader().load(path)

    def test_schema_violation_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "bad-schema.yml"
        path.write_text("projects:\n  api:\n    branch_prefix: fix\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            YamlConfigLoader().load(path)

    def test_empty_file_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yml"
        path.write_text("", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="empty"):
            YamlConfigLoader().load(path)
