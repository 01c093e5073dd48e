"""Configuration for the REST server."""

from __future__ import annotations

from pydantic import Field

from blueprint_visualizer.config import VisualizerSettings


class ServerSettings(VisualizerSettings):
    """Settings for the HTTP API.

    Adds bind address and CORS on top of :class:`VisualizerSettings`, so the
    diagram labels and log level are configured the same way for both surfaces.
    """

    host: str = Field(default="127.0.0.1", validation_alias="VISUALIZER_HOST")
    port: int = Field(default=8080, ge=1, le=65535, validation_alias="VISUALIZER_PORT")

    # Browser front-ends post blueprints directly. Override via VISUALIZER_CORS_ORIGINS=...
    cors_origins: str = Field(
        default="*",
        validation_alias="VISUALIZER_CORS_ORIGINS",
        description="Comma-separated list of allowed CORS origins.",
    )

    def parsed_cors_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]
