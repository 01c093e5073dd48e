"""Blueprint -> sequence diagram translation.

- ``functions``: per-function mapping of phases to diagram events
- ``builder``: assembles the intermediate :class:`DiagramModel`
- ``renderer``: serialises the model as Mermaid text
"""

from blueprint_visualizer.diagram.builder import build
from blueprint_visualizer.diagram.errors import (
    InvalidArgument,
    TranslationError,
    UnsupportedFunction,
)
from blueprint_visualizer.diagram.functions import (
    FUNCTION_KINDS,
    ArgSpec,
    FunctionKind,
    map_phase,
    register_function_kind,
)
from blueprint_visualizer.diagram.model import (
    DEFAULT_LABELS,
    ArrowStyle,
    DiagramAction,
    DiagramLabels,
    DiagramModel,
    DiagramPhase,
    Event,
)
from blueprint_visualizer.diagram.renderer import markdown_block, render
from blueprint_visualizer.diagram.translate import translate

__all__ = [
    "DEFAULT_LABELS",
    "FUNCTION_KINDS",
    "ArgSpec",
    "ArrowStyle",
    "DiagramAction",
    "DiagramLabels",
    "DiagramModel",
    "DiagramPhase",
    "Event",
    "FunctionKind",
    "InvalidArgument",
    "TranslationError",
    "UnsupportedFunction",
    "build",
    "map_phase",
    "markdown_block",
    "register_function_kind",
    "render",
    "translate",
]
