from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ticket_flow.core.domain.delivery import DEFAULT_BRANCH_PREFIX


class AppSettings(BaseSettings):
    # App Config
    app_name: str = "ticket-flow"
    log_level: str = "INFO"

    # Filesystem
    config_path: Path = Field(default=Path("config/ticket-flow.yml"))

    # Pipeline behaviour
    default_branch_prefix: str = DEFAULT_BRANCH_PREFIX
    headless: bool = False

    model_config = SettingsConfigDict(env_file=None, extra="ignore")
