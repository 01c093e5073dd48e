"""Intermediate sequence-diagram model.

The model sits between the translation logic (builder + function mapper) and
the text renderer. It is built once per translation and never shared.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ArrowStyle(str, Enum):
    SOLID_ASYNC = "->>"
    DASHED_ASYNC = "-->>"


@dataclass(frozen=True, slots=True)
class DiagramLabels:
    """Fixed names shown in every diagram.

    Keep these explicit so callers (and tests) can substitute their own.
    """

    actor: str = "User"
    orchestrator: str = "Kanister"
    app_namespace: str = "App"


DEFAULT_LABELS = DiagramLabels()


@dataclass(frozen=True, slots=True)
class Event:
    """A single diagram primitive produced for a phase."""

    source: str
    target: str
    label: str
    arrow: ArrowStyle
    note: str = ""
    creates_participant: bool = False
    destroys_participant: bool = False


@dataclass(slots=True)
class DiagramPhase:
    description: str
    events: list[Event] = field(default_factory=list)


@dataclass(slots=True)
class DiagramAction:
    title: str
    phases: list[DiagramPhase] = field(default_factory=list)


@dataclass(slots=True)
class DiagramModel:
    actors: list[str]
    participants: list[str]
    actions: list[DiagramAction] = field(default_factory=list)

    @classmethod
    def empty(cls, labels: DiagramLabels = DEFAULT_LABELS) -> DiagramModel:
        """A model holding only the fixed actor and orchestrator participant."""

        return cls(actors=[labels.actor], participants=[labels.orchestrator])

    @property
    def actor(self) -> str:
        """The actor that starts every action (the first one declared)."""

        return self.actors[0]

    @property
    def orchestrator(self) -> str:
        """The participant that runs every action (always declared first)."""

        return self.participants[0]

    def event_count(self) -> int:
        return sum(len(phase.events) for action in self.actions for phase in action.phases)
