"""Render a :class:`DiagramModel` as Mermaid ``sequenceDiagram`` text.

Output is one directive per line, each indented by four spaces and terminated
by a newline. Nothing is escaped: note text (including ``<br>`` markers) is
written as given.
"""

from __future__ import annotations

from .model import ArrowStyle, DiagramModel, Event

HEADER = "sequenceDiagram"
INDENT = "    "


def _arrow(source: str, arrow: ArrowStyle, target: str, label: str) -> str:
    return f"{INDENT}{source}{arrow.value}{target}: {label}\n"


def _note(over: str, text: str) -> str:
    return f"{INDENT}note right of {over}: {text}\n"


def _event_lines(event: Event) -> list[str]:
    lines: list[str] = []
    if event.creates_participant:
        lines.append(f"{INDENT}create participant {event.target}\n")
    if event.destroys_participant:
        lines.append(f"{INDENT}destroy {event.source}\n")
    lines.append(_arrow(event.source, event.arrow, event.target, event.label))
    if event.note:
        lines.append(_note(event.target, event.note))
    return lines


def render(model: DiagramModel) -> str:
    lines: list[str] = [HEADER + "\n"]
    lines.extend(f"{INDENT}actor {actor}\n" for actor in model.actors)
    lines.extend(f"{INDENT}participant {participant}\n" for participant in model.participants)

    for action in model.actions:
        lines.append(
            _arrow(model.actor, ArrowStyle.SOLID_ASYNC, model.orchestrator, action.title)
        )
        for phase in action.phases:
            lines.append(_note(model.orchestrator, phase.description))
            for event in phase.events:
                lines.extend(_event_lines(event))
        lines.append(
            _arrow(
                model.orchestrator,
                ArrowStyle.DASHED_ASYNC,
                model.actor,
                action.title + " completed!",
            )
        )

    return "".join(lines)


def markdown_block(text: str) -> str:
    """Wrap Mermaid source in a Markdown code fence."""

    return "```mermaid\n" + text.rstrip() + "\n```\n"
