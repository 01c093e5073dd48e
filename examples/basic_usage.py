#!/usr/bin/env python3
"""Programmatic rendering example.

This demonstrates using the visualizer components directly:

* load settings from `.env`
* register an extra blueprint function kind
* load, validate and render a blueprint file
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from blueprint_visualizer.blueprint import BlueprintError, load_blueprint, validate_blueprint
from blueprint_visualizer.config import VisualizerSettings
from blueprint_visualizer.diagram import (
    FUNCTION_KINDS,
    ArgSpec,
    FunctionKind,
    TranslationError,
    markdown_block,
    register_function_kind,
    translate,
)
from blueprint_visualizer.logging import configure_logging

DELETE_DATA = FunctionKind(
    name="DeleteData",
    participant="{namespace}/kanister-job",
    note="Delete backup artifacts <br> under {backupArtifactPrefix}",
    args=(ArgSpec("backupArtifactPrefix"),),
)


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a blueprint (programmatic example).")
    parser.add_argument(
        "blueprint",
        nargs="?",
        default=str(Path(__file__).with_name("mysql-blueprint.yaml")),
        help="Blueprint YAML file",
    )
    parser.add_argument("--markdown", action="store_true", help="Wrap output in a mermaid fence")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    settings = VisualizerSettings()
    configure_logging(settings.log_level)

    if DELETE_DATA.name not in FUNCTION_KINDS:
        register_function_kind(DELETE_DATA)

    try:
        blueprint = load_blueprint(Path(args.blueprint).read_text(encoding="utf-8"))
        validate_blueprint(blueprint)
        diagram = translate(blueprint, labels=settings.labels())
    except (BlueprintError, TranslationError) as exc:
        print(str(exc))
        return 1

    print(markdown_block(diagram) if args.markdown else diagram, end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
