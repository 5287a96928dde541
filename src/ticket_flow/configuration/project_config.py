from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SourceConfig(BaseModel):
    """Source code provider settings (GitHub, GitLab, local checkout)."""

    model_config = ConfigDict(extra="ignore")

    type: str = ""
    url: str | None = None
    path: str | None = None
    auth: str = ""


class TicketConfig(BaseModel):
    """Ticket provider settings (Jira, GitHub, Azure DevOps)."""

    model_config = ConfigDict(extra="ignore")

    type: str = ""
    organization: str | None = None
    project: str | None = None
    url: str | None = None
    auth: str = ""


class ProjectConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    pipeline: str = Field(..., description="Name of the pipeline to run for this project")
    branch_prefix: str | None = Field(
        default=None, description="Branch prefix; falls back to the application default"
    )
    source: SourceConfig = Field(default_factory=SourceConfig)
    tickets: TicketConfig = Field(default_factory=TicketConfig)
    coding_principles_path: str | None = None


class PipelineConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    commands: list[str] = Field(default_factory=list, description="Ordered command names")

    @field_validator("commands")
    @classmethod
    def validate_commands(cls, v: list[str]) -> list[str]:
        if any(not c or not c.strip() for c in v):
            raise ValueError("pipeline commands cannot be blank")
        return v


class TicketFlowConfig(BaseModel):
    """Root configuration deserialized from the YAML config file."""

    model_config = ConfigDict(extra="ignore")

    projects: dict[str, ProjectConfig] = Field(default_factory=dict)
    pipelines: dict[str, PipelineConfig] = Field(default_factory=dict)
    secrets: dict[str, str] = Field(default_factory=dict)
