"""One-call blueprint -> Mermaid translation used by the CLI and the server."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from blueprint_visualizer.blueprint import Blueprint

from .builder import build
from .functions import FUNCTION_KINDS, FunctionKind
from .model import DEFAULT_LABELS, DiagramLabels
from .renderer import render

logger = logging.getLogger(__name__)


def translate(
    blueprint: Blueprint,
    *,
    labels: DiagramLabels = DEFAULT_LABELS,
    registry: Mapping[str, FunctionKind] = FUNCTION_KINDS,
) -> str:
    """Build and render the sequence diagram for a validated blueprint.

    Raises:
        TranslationError: propagated from the builder; no text is produced.
    """

    model = build(blueprint, labels=labels, registry=registry)
    text = render(model)
    logger.info(
        "Sequence diagram rendered",
        extra={"actions": len(model.actions), "lines": text.count("\n")},
    )
    return text
