"""Helper utility functions for pnpm-overrides."""

import json
from pathlib import Path
from typing import Any

from pnpm_overrides.exceptions import PathTraversalError


def project_path(root: Path | str, name: str | Path) -> Path:
    """Resolve a project-relative file name against the project root.

    Absolute names are accepted as long as they still live inside the root.

    Raises:
        PathTraversalError: If the path resolves outside the project root
    """
    root_path = Path(root).resolve()
    candidate = Path(name)
    target = candidate.resolve() if candidate.is_absolute() else (root_path / candidate).resolve()

    try:
        target.relative_to(root_path)
    except ValueError as e:
        raise PathTraversalError(
            f"Path traversal attempt detected: {name} resolves outside project root"
        ) from e

    return target


def dump_json(data: Any) -> str:
    """Serialize data the way npm writes package.json: 2-space indent, key order kept."""
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def save_json_file(data: Any, file_path: Path | str) -> None:
    """Save data as JSON to file.

    Args:
        data: Data to save
        file_path: Path to output file
    """
    with open(file_path, "w", encoding="utf-8") as f:
        f.write(dump_json(data))
