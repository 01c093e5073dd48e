"""Configuration for the blueprint visualizer.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)

Every setting has a default, so the CLI works without any configuration.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from blueprint_visualizer.diagram.model import DiagramLabels


class VisualizerSettings(BaseSettings):
    """Settings shared by the CLI and the server.

    Environment variables:
    - LOG_LEVEL                       (optional)
    - BLUEPRINT_ACTOR_LABEL           (optional)
    - BLUEPRINT_ORCHESTRATOR_LABEL    (optional)
    - BLUEPRINT_APP_NAMESPACE_LABEL   (optional)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `VisualizerSettings(_env_file=path_to_env)`.
    """

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )

    actor_label: str = Field(
        default="User",
        min_length=1,
        validation_alias="BLUEPRINT_ACTOR_LABEL",
        description="Name of the human actor that starts every action",
    )
    orchestrator_label: str = Field(
        default="Kanister",
        min_length=1,
        validation_alias="BLUEPRINT_ORCHESTRATOR_LABEL",
        description="Name of the participant that runs the blueprint",
    )
    app_namespace_label: str = Field(
        default="App",
        min_length=1,
        validation_alias="BLUEPRINT_APP_NAMESPACE_LABEL",
        description=(
            "Namespace shown when a phase's namespace argument is empty or an unrendered "
            "template such as '{{ .Deployment.Namespace }}'"
        ),
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
    )

    def labels(self) -> DiagramLabels:
        return DiagramLabels(
            actor=self.actor_label,
            orchestrator=self.orchestrator_label,
            app_namespace=self.app_namespace_label,
        )
