"""Blueprint documents: loading and structural validation.

A blueprint is a YAML document of the form::

    actions:
      backup:
        phases:
          - func: ScaleWorkload
            name: shutdownPod
            args:
              namespace: "{{ .Deployment.Namespace }}"
              ...

Only the parts needed to describe execution are modelled. Everything else in
the document (``apiVersion``, ``metadata``, output artifacts, ...) is ignored.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

DEFAULT_VERSION = "v0.0.0"
SUPPORTED_VERSIONS: frozenset[str] = frozenset({DEFAULT_VERSION})


class BlueprintError(Exception):
    """The blueprint cannot be translated as given."""


class BlueprintParseError(BlueprintError):
    """The document is not YAML, or does not have the blueprint structure."""


class BlueprintValidationError(BlueprintError):
    """The document parsed, but breaks a blueprint rule."""


class BlueprintPhase(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    func: str
    name: str = ""
    args: dict[str, Any] = Field(default_factory=dict)

    @field_validator("args", mode="before")
    @classmethod
    def _none_args_are_empty(cls, value: object) -> object:
        return {} if value is None else value


class BlueprintAction(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    phases: list[BlueprintPhase] = Field(default_factory=list)

    @field_validator("phases", mode="before")
    @classmethod
    def _none_phases_are_empty(cls, value: object) -> object:
        return [] if value is None else value


class Blueprint(BaseModel):
    """A parsed blueprint. Actions keep the order they have in the document."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    actions: dict[str, BlueprintAction] = Field(default_factory=dict)

    @field_validator("actions", mode="before")
    @classmethod
    def _none_actions_are_empty(cls, value: object) -> object:
        return {} if value is None else value


def load_blueprint(text: str) -> Blueprint:
    """Parse blueprint YAML into a :class:`Blueprint`.

    Raises:
        BlueprintParseError: the text is not YAML or lacks the blueprint structure.
    """

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise BlueprintParseError(str(e)) from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise BlueprintParseError(
            f"blueprint must be a mapping at the top level, got {type(raw).__name__}"
        )

    try:
        return Blueprint.model_validate(raw)
    except ValidationError as e:
        raise BlueprintParseError(str(e)) from e


def validate_blueprint(blueprint: Blueprint, version: str = DEFAULT_VERSION) -> None:
    """Check the rules a blueprint must satisfy before it can be visualised.

    Rules:
    - the version must be one we know
    - every action has at least one phase
    - every phase names a function and has a name
    - phase names are unique within an action

    Raises:
        BlueprintValidationError: on the first rule violation.
    """

    if version not in SUPPORTED_VERSIONS:
        raise BlueprintValidationError(f"unsupported blueprint version {version!r}")

    for action_name, action in blueprint.actions.items():
        if not action.phases:
            raise BlueprintValidationError(f"action {action_name} has no phases")

        for index, phase in enumerate(action.phases):
            if not phase.func.strip():
                raise BlueprintValidationError(
                    f"action {action_name}: phase #{index} does not name a function"
                )
            if not phase.name.strip():
                raise BlueprintValidationError(
                    f"action {action_name}: phase #{index} ({phase.func}) has no name"
                )

        duplicates = sorted(
            name for name, count in Counter(p.name for p in action.phases).items() if count > 1
        )
        if duplicates:
            raise BlueprintValidationError(
                f"action {action_name} has duplicate phase names: {', '.join(duplicates)}"
            )

    logger.debug(
        "Blueprint validated",
        extra={"actions": len(blueprint.actions), "version": version},
    )
