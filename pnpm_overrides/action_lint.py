"""Structural checks for the composite action's ``action.yml``."""

import re
from collections.abc import Iterable
from pathlib import Path

from pnpm_overrides.documents import DocumentState, load_yaml_document

REQUIRED_FIELDS = ("name", "description", "author", "runs")

CLI_NAME = "pnpm-overrides"

_CLI_INVOCATION = re.compile(rf"(?<![\w-]){re.escape(CLI_NAME)}\s+([a-z][a-z0-9-]*)")


def referenced_commands(script: str) -> list[str]:
    """Return the CLI subcommands a ``run:`` script invokes, in order."""
    return _CLI_INVOCATION.findall(script)


def lint_action_metadata(path: Path | str, known_commands: Iterable[str]) -> list[str]:
    """Validate action.yml and return a list of problems (empty when valid)."""
    path = Path(path)
    doc = load_yaml_document(path)

    if doc.state is DocumentState.ABSENT:
        return [f"{path.name} does not exist"]
    if doc.state is DocumentState.MALFORMED:
        return [f"{path.name} is not valid YAML: {doc.error}"]
    if not doc.is_mapping:
        return [f"{path.name} must be a YAML mapping"]

    action = doc.data
    problems = [
        f"Missing required field: {name}" for name in REQUIRED_FIELDS if not action.get(name)
    ]

    runs = action.get("runs")
    if isinstance(runs, dict):
        if runs.get("using") != "composite":
            problems.append("Action must use composite runs")

        steps = runs.get("steps")
        if not isinstance(steps, list):
            problems.append("runs.steps must be a list")
        else:
            problems.extend(_lint_steps(steps, set(known_commands)))
    elif runs is not None:
        problems.append("runs must be a mapping")

    with open(path, encoding="utf-8") as f:
        if "::set-output" in f.read():
            problems.append("Action contains deprecated ::set-output commands")

    return problems


def _lint_steps(steps: list, known: set[str]) -> list[str]:
    problems = []
    for index, step in enumerate(steps):
        if not isinstance(step, dict):
            problems.append(f"Step {index + 1} is not a mapping")
            continue

        script = step.get("run")
        if not script:
            continue

        label = step.get("name") or f"#{index + 1}"
        if not step.get("shell"):
            problems.append(f'Step "{label}" is missing shell property')

        for command in referenced_commands(str(script)):
            if command not in known:
                problems.append(f'Step "{label}" calls unknown command: {CLI_NAME} {command}')

    return problems
