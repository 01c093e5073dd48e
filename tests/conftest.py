"""Test configuration and fixtures."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest

from blueprint_visualizer.blueprint import Blueprint
from blueprint_visualizer.logging import JsonFormatter

SETTINGS_ENV_VARS = (
    "LOG_LEVEL",
    "BLUEPRINT_ACTOR_LABEL",
    "BLUEPRINT_ORCHESTRATOR_LABEL",
    "BLUEPRINT_APP_NAMESPACE_LABEL",
    "VISUALIZER_HOST",
    "VISUALIZER_PORT",
    "VISUALIZER_CORS_ORIGINS",
)

BACKUP_BLUEPRINT_YAML = """\
apiVersion: cr.kanister.io/v1alpha1
kind: Blueprint
metadata:
  name: app-blueprint
actions:
  Backup:
    phases:
      - func: ScaleWorkload
        name: scaleDown
        args:
          namespace: ns1
          kind: Deployment
          name: app
          replicas: 0
"""


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    """The CLI reconfigures root logging; undo it after each test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler.formatter, JsonFormatter):
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def settings_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty directory with no visualizer variables set."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def backup_yaml() -> str:
    """Provide a single-action, single-phase blueprint document."""
    return BACKUP_BLUEPRINT_YAML


@pytest.fixture
def make_blueprint() -> Callable[..., Blueprint]:
    """Build a blueprint from ``action_name=[phase_dict, ...]`` keywords."""

    def _make(**actions: list[dict[str, Any]]) -> Blueprint:
        return Blueprint.model_validate(
            {"actions": {name: {"phases": phases} for name, phases in actions.items()}}
        )

    return _make
