from __future__ import annotations

import logging
from collections.abc import Mapping

from blueprint_visualizer.blueprint import Blueprint

from .functions import FUNCTION_KINDS, FunctionKind, map_phase
from .model import DEFAULT_LABELS, DiagramAction, DiagramLabels, DiagramModel, DiagramPhase

logger = logging.getLogger(__name__)


def build(
    blueprint: Blueprint,
    *,
    labels: DiagramLabels = DEFAULT_LABELS,
    registry: Mapping[str, FunctionKind] = FUNCTION_KINDS,
) -> DiagramModel:
    """Build the diagram model for a validated blueprint.

    Actions keep the blueprint's order and phases keep their positional order.
    The first phase that cannot be mapped aborts the build; no partial model is
    returned.
    """

    model = DiagramModel.empty(labels)
    for action_name, action in blueprint.actions.items():
        diagram_action = DiagramAction(title=action_name)
        for phase in action.phases:
            diagram_phase = DiagramPhase(description="phase " + phase.name)
            diagram_phase.events.extend(map_phase(phase, labels=labels, registry=registry))
            diagram_action.phases.append(diagram_phase)
        model.actions.append(diagram_action)

    logger.debug(
        "Diagram model built",
        extra={"actions": len(model.actions), "events": model.event_count()},
    )
    return model
