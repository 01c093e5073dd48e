"""FastAPI app factory.

Endpoints are intentionally thin wrappers over the blueprint loader and the
diagram translation.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from blueprint_visualizer import __version__
from blueprint_visualizer.blueprint import (
    BlueprintParseError,
    BlueprintValidationError,
    load_blueprint,
    validate_blueprint,
)
from blueprint_visualizer.diagram.errors import TranslationError
from blueprint_visualizer.diagram.functions import FUNCTION_KINDS
from blueprint_visualizer.diagram.translate import translate
from blueprint_visualizer.server.config import ServerSettings
from blueprint_visualizer.server.models import ApiFunctionKind, HealthStatus

logger = logging.getLogger(__name__)

API_VERSION = "v1"


def create_app(settings: ServerSettings | None = None) -> FastAPI:
    settings = settings or ServerSettings()
    labels = settings.labels()

    app = FastAPI(
        title="Blueprint Visualizer",
        version=__version__,
        description="Render blueprint YAML as Mermaid sequence diagrams.",
        openapi_url=f"/{API_VERSION}/openapi.json",
        docs_url=f"/{API_VERSION}/docs",
        redoc_url=None,
    )

    # Expose settings for request handlers that want to read it.
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.parsed_cors_origins(),
        allow_methods=["*"],
        allow_headers=["Content-Type"],
    )

    @app.get(f"/{API_VERSION}/health", response_model=HealthStatus)
    def health() -> HealthStatus:
        return HealthStatus(version=__version__)

    @app.get(f"/{API_VERSION}/functions", response_model=list[ApiFunctionKind])
    def list_functions() -> list[ApiFunctionKind]:
        return [ApiFunctionKind.from_kind(kind) for kind in FUNCTION_KINDS.values()]

    @app.post(f"/{API_VERSION}/validate", response_class=PlainTextResponse)
    async def validate(request: Request) -> PlainTextResponse:
        raw = await request.body()
        logger.debug("Blueprint received", extra={"bytes": len(raw)})

        try:
            blueprint = load_blueprint(raw.decode("utf-8"))
        except (UnicodeDecodeError, BlueprintParseError) as e:
            logger.warning("Blueprint could not be parsed", extra={"error": str(e)})
            raise HTTPException(status_code=400, detail=f"Bad Request. Error: {e}") from e

        try:
            validate_blueprint(blueprint)
        except BlueprintValidationError as e:
            logger.warning("Blueprint failed validation", extra={"error": str(e)})
            raise HTTPException(
                status_code=400, detail=f"Failed to validate Blueprint. Error: {e}"
            ) from e

        try:
            diagram = translate(blueprint, labels=labels)
        except TranslationError as e:
            logger.warning("Blueprint could not be translated", extra={"error": str(e)})
            raise HTTPException(
                status_code=501,
                detail=f"Failed to create flowchart for Blueprint. Error: {e}",
            ) from e

        return PlainTextResponse(diagram)

    return app
