from __future__ import annotations

import os
from pathlib import Path

import structlog
import yaml
from pydantic import ValidationError

from ticket_flow.configuration.project_config import TicketFlowConfig
from ticket_flow.core.exceptions import ConfigurationError

logger = structlog.get_logger()


class YamlConfigLoader:
    """Loads the ticket-flow YAML file and resolves ``${ENV_VAR}`` secret placeholders."""

    def load(self, config_path: str | Path) -> TicketFlowConfig:
        path = Path(config_path)
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

        if data is None:
            raise ConfigurationError(f"Configuration file is empty: {path}")
        if not isinstance(data, dict):
            raise ConfigurationError(f"Invalid YAML in {path}: expected a mapping at the top level")

        try:
            config = TicketFlowConfig(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

        config.secrets = {k: self._resolve_env(v) for k, v in config.secrets.items()}
        logger.info(
            "Configuration loaded",
            config_path=str(path),
            projects=len(config.projects),
            pipelines=len(config.pipelines),
        )
        return config

    @staticmethod
    def _resolve_env(value: str) -> str:
        if not (value.startswith("${") and value.endswith("}")):
            return value
        return os.environ.get(value[2:-1], "")
