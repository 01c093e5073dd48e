"""Pydantic models for the REST server."""

from __future__ import annotations

from pydantic import BaseModel, Field

from blueprint_visualizer.diagram.functions import FunctionKind


class ApiFunctionKind(BaseModel):
    name: str
    participant: str
    note: str
    arguments: list[str] = Field(default_factory=list)

    @classmethod
    def from_kind(cls, kind: FunctionKind) -> ApiFunctionKind:
        return cls(
            name=kind.name,
            participant=kind.participant,
            note=kind.note,
            arguments=[kind.namespace_arg, *(spec.key for spec in kind.args)],
        )


class HealthStatus(BaseModel):
    status: str = "ok"
    version: str
