"""Unit tests for blueprint loading and validation."""

from __future__ import annotations

import pytest

from blueprint_visualizer.blueprint import (
    BlueprintParseError,
    BlueprintValidationError,
    load_blueprint,
    validate_blueprint,
)


def test_load_keeps_document_order_and_ignores_extra_keys() -> None:
    blueprint = load_blueprint(
        """\
kind: Blueprint
metadata:
  name: bp
actions:
  restore:
    inputArtifactNames: [dump]
    phases:
      - func: KubeTask
        name: restoreDump
        args: {namespace: ns, image: busybox}
  backup:
    phases:
      - func: KubeTask
        name: dump
        args:
"""
    )

    assert list(blueprint.actions) == ["restore", "backup"]
    assert blueprint.actions["restore"].phases[0].args == {"namespace": "ns", "image": "busybox"}
    assert blueprint.actions["backup"].phases[0].args == {}


def test_load_empty_document_gives_empty_blueprint() -> None:
    assert load_blueprint("").actions == {}
    assert load_blueprint("actions:\n").actions == {}


@pytest.mark.parametrize(
    "text",
    [
        "actions: [unterminated",
        "- just\n- a list\n",
        "actions:\n  backup:\n    phases:\n      - name: missingFunc\n",
        "actions:\n  backup:\n    phases: not-a-list\n",
    ],
)
def test_load_rejects_malformed_documents(text: str) -> None:
    with pytest.raises(BlueprintParseError):
        load_blueprint(text)


def test_validate_accepts_well_formed_blueprint(backup_yaml: str) -> None:
    validate_blueprint(load_blueprint(backup_yaml))


@pytest.mark.parametrize(
    ("text", "fragment"),
    [
        ("actions:\n  backup:\n    phases: []\n", "no phases"),
        ("actions:\n  backup:\n    phases:\n      - {func: '', name: a}\n", "function"),
        ("actions:\n  backup:\n    phases:\n      - {func: KubeTask}\n", "no name"),
        (
            "actions:\n  backup:\n    phases:\n      - {func: KubeTask, name: a}\n"
            "      - {func: KubeExec, name: a}\n",
            "duplicate phase names: a",
        ),
    ],
)
def test_validate_rejects_rule_violations(text: str, fragment: str) -> None:
    with pytest.raises(BlueprintValidationError) as excinfo:
        validate_blueprint(load_blueprint(text))

    assert fragment in str(excinfo.value)


def test_validate_rejects_unknown_version(backup_yaml: str) -> None:
    with pytest.raises(BlueprintValidationError):
        validate_blueprint(load_blueprint(backup_yaml), version="v9")
