"""Map blueprint phases to diagram events.

Each supported blueprint function is described by a :class:`FunctionKind`
entry in :data:`FUNCTION_KINDS`: the arguments it reads, how the target
participant is named, and the note shown next to the call. Supporting a new
function means adding one entry; the builder and renderer do not change.

Every kind currently produces the same call/return pair:

- the orchestrator creates the target participant and calls it (solid arrow,
  annotated with the note)
- the target answers ``Done`` and is destroyed (dashed arrow, no note)
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from typing import cast

from blueprint_visualizer.blueprint import BlueprintPhase

from .errors import InvalidArgument, UnsupportedFunction
from .model import DEFAULT_LABELS, ArrowStyle, DiagramLabels, Event

TEMPLATE_MARKER = "{{"
RETURN_LABEL = "Done"


@dataclass(frozen=True, slots=True)
class ArgSpec:
    key: str
    types: tuple[type, ...] = (str,)
    required: bool = True


@dataclass(frozen=True, slots=True)
class FunctionKind:
    """How one blueprint function shows up in a diagram.

    ``participant`` and ``note`` are :meth:`str.format` templates over the
    argument keys in ``args`` plus ``namespace`` (already resolved).
    """

    name: str
    participant: str
    note: str
    args: tuple[ArgSpec, ...] = ()
    namespace_arg: str = "namespace"


FUNCTION_KINDS: dict[str, FunctionKind] = {
    kind.name: kind
    for kind in (
        FunctionKind(
            name="KubeTask",
            participant="{namespace}/kanister-job",
            note=(
                "Create a tooling pod with <br> image: {image} <br> namespace: {namespace} "
                "<br> and execute commands"
            ),
            args=(ArgSpec("image"),),
        ),
        FunctionKind(
            name="ScaleWorkload",
            participant="{namespace}/{kind}/{name}",
            note="Set the replica count <br> of {kind}/{name} to {replicas}",
            args=(
                ArgSpec("kind"),
                ArgSpec("name"),
                # Replicas may still be a template placeholder.
                ArgSpec("replicas", types=(int, str)),
            ),
        ),
        FunctionKind(
            name="KubeExec",
            participant="{namespace}/{pod}",
            note="Execute commands in <br> container: {container} <br> of pod: {pod}",
            args=(ArgSpec("pod"), ArgSpec("container")),
        ),
        FunctionKind(
            name="PrepareData",
            participant="{namespace}/kanister-job",
            note="Create a pod with <br> image: {image} <br> and prepare data on mounted volumes",
            args=(ArgSpec("image"),),
        ),
        FunctionKind(
            name="BackupData",
            participant="{namespace}/{pod}",
            note="Back up data from <br> container: {container} <br> to {backupArtifactPrefix}",
            args=(ArgSpec("pod"), ArgSpec("container"), ArgSpec("backupArtifactPrefix")),
        ),
    )
}


def register_function_kind(
    kind: FunctionKind, registry: MutableMapping[str, FunctionKind] = FUNCTION_KINDS
) -> None:
    """Add a function kind to a registry (the global one by default)."""

    if kind.name in registry:
        raise ValueError(f"function kind already registered: {kind.name}")
    registry[kind.name] = kind


def _accepts(value: object, types: tuple[type, ...]) -> bool:
    # bool is an int subclass; only accept it when asked for explicitly.
    if isinstance(value, bool) and bool not in types:
        return False
    return isinstance(value, types)


def _typed_arg(phase: BlueprintPhase, spec: ArgSpec) -> object:
    if spec.key not in phase.args or phase.args[spec.key] is None:
        if spec.required:
            raise InvalidArgument(phase.name, phase.func, spec.key, "missing")
        return ""

    value = phase.args[spec.key]
    if not _accepts(value, spec.types):
        expected = " or ".join(t.__name__ for t in spec.types)
        raise InvalidArgument(
            phase.name,
            phase.func,
            spec.key,
            f"expected {expected}, got {type(value).__name__}",
        )
    return value


def resolve_namespace(phase: BlueprintPhase, kind: FunctionKind, labels: DiagramLabels) -> str:
    """Namespace to show for a phase.

    Empty or unrendered template values (``{{ ... }}``) fall back to the
    application namespace label.
    """

    value = cast(str, _typed_arg(phase, ArgSpec(kind.namespace_arg, required=False)))
    if not value or value.startswith(TEMPLATE_MARKER):
        return labels.app_namespace
    return value


def map_phase(
    phase: BlueprintPhase,
    *,
    labels: DiagramLabels = DEFAULT_LABELS,
    registry: Mapping[str, FunctionKind] = FUNCTION_KINDS,
) -> list[Event]:
    """Return the ordered diagram events for one phase.

    Raises:
        UnsupportedFunction: the phase's function has no registry entry.
        InvalidArgument: a required argument is missing or has the wrong type.
    """

    kind = registry.get(phase.func)
    if kind is None:
        raise UnsupportedFunction(phase.func)

    values: dict[str, object] = {spec.key: _typed_arg(phase, spec) for spec in kind.args}
    values["namespace"] = resolve_namespace(phase, kind, labels)

    participant = kind.participant.format(**values)
    return [
        Event(
            source=labels.orchestrator,
            target=participant,
            label=phase.func,
            arrow=ArrowStyle.SOLID_ASYNC,
            note=kind.note.format(**values),
            creates_participant=True,
        ),
        Event(
            source=participant,
            target=labels.orchestrator,
            label=RETURN_LABEL,
            arrow=ArrowStyle.DASHED_ASYNC,
            destroys_participant=True,
        ),
    ]
