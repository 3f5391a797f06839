"""Remove the ``overrides`` key from package.json and pnpm-workspace.yaml.

pnpm reads overrides from either file. Removing them lets the action re-run
``pnpm install`` and ``pnpm audit`` to see whether the pins still matter. What
was removed is written to a record file so the summary step can list it.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pnpm_overrides.documents import (
    DocumentState,
    LoadedDocument,
    load_json_document,
    load_yaml_document,
    save_json_document,
    save_yaml_document,
)
from pnpm_overrides.exceptions import ManifestError
from pnpm_overrides.utils.constants import (
    OVERRIDES_KEY,
    PACKAGE_JSON_FILE,
    REMOVED_OVERRIDES_FILE,
    WORKSPACE_FILE,
)
from pnpm_overrides.utils.helpers import project_path
from pnpm_overrides.utils.logging import logger


@dataclass
class RemovedOverrides:
    """Overrides removed from each document, keyed by package identifier."""

    package_json: dict[str, Any] = field(default_factory=dict)
    workspace: dict[str, Any] = field(default_factory=dict)

    def is_empty(self) -> bool:
        return not self.package_json and not self.workspace

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return {"packageJson": dict(self.package_json), "workspace": dict(self.workspace)}

    @classmethod
    def from_dict(cls, data: Any) -> "RemovedOverrides":
        """Build a record from its JSON form; anything unexpected becomes empty."""
        if not isinstance(data, dict):
            return cls()
        package_json = data.get("packageJson")
        workspace = data.get("workspace")
        return cls(
            package_json=dict(package_json) if isinstance(package_json, dict) else {},
            workspace=dict(workspace) if isinstance(workspace, dict) else {},
        )


@dataclass
class StripResult:
    """Outcome of one strip_overrides run."""

    removed: RemovedOverrides
    package_json_modified: bool = False
    workspace_modified: bool = False
    record_path: Path | None = None
    warnings: list[str] = field(default_factory=list)

    @property
    def modified(self) -> bool:
        return self.package_json_modified or self.workspace_modified


def _as_override_map(value: Any, source: str) -> dict[str, Any]:
    # npm allows nested override objects, so values are kept as parsed
    if isinstance(value, dict):
        return dict(value)
    logger.warning(
        f"'{OVERRIDES_KEY}' in {source} is not a mapping ({type(value).__name__}), removing it"
    )
    return {}


def pop_overrides(document: dict[str, Any], source: str) -> dict[str, Any] | None:
    """Delete the top-level overrides key in place.

    Returns:
        The removed override map, or None when the key was absent
    """
    if OVERRIDES_KEY not in document:
        return None
    return _as_override_map(document.pop(OVERRIDES_KEY), source)


def load_manifest(path: Path) -> dict[str, Any]:
    """Load package.json, which every run requires.

    Raises:
        ManifestError: If the file is missing, unparseable or not an object
    """
    doc = load_json_document(path)
    if doc.state is DocumentState.ABSENT:
        raise ManifestError(f"{path.name} not found in {path.parent}", path=path)
    if doc.state is DocumentState.MALFORMED:
        raise ManifestError(f"Could not parse {path.name}: {doc.error}", path=path)
    if not doc.is_mapping:
        raise ManifestError(f"{path.name} must contain a JSON object", path=path)
    return doc.data


def _strip_workspace(doc: LoadedDocument, result: StripResult) -> None:
    if doc.state is DocumentState.ABSENT:
        logger.debug(f"No {doc.path.name} found, skipping workspace overrides")
        return

    if doc.state is DocumentState.MALFORMED:
        message = f"Could not parse {doc.path.name}: {doc.error}"
        logger.warning(message)
        result.warnings.append(message)
        return

    if not doc.is_mapping:
        logger.debug(f"{doc.path.name} is not a mapping, leaving it untouched")
        return

    removed = pop_overrides(doc.data, doc.path.name)
    if removed is None:
        return

    save_yaml_document(doc.data, doc.path)
    result.removed.workspace = removed
    result.workspace_modified = True


def strip_overrides(
    root: Path | str = ".",
    *,
    package_json: str = PACKAGE_JSON_FILE,
    workspace_file: str = WORKSPACE_FILE,
    record_file: str = REMOVED_OVERRIDES_FILE,
) -> StripResult:
    """Remove overrides from both documents and record what was removed.

    Args:
        root: Project root containing the documents
        package_json: Manifest file name, relative to root
        workspace_file: Workspace file name, relative to root
        record_file: Where to write the removed-overrides record

    Returns:
        StripResult describing what changed. No record is written when
        neither document had overrides.

    Raises:
        ManifestError: If package.json is missing or malformed
    """
    manifest_path = project_path(root, package_json)
    workspace_path = project_path(root, workspace_file)
    record_path = project_path(root, record_file)

    result = StripResult(removed=RemovedOverrides())

    manifest = load_manifest(manifest_path)
    removed = pop_overrides(manifest, manifest_path.name)
    if removed is not None:
        save_json_document(manifest, manifest_path)
        result.removed.package_json = removed
        result.package_json_modified = True
        logger.debug(f"Removed {len(removed)} overrides from {manifest_path}")

    _strip_workspace(load_yaml_document(workspace_path), result)

    if result.modified:
        save_json_document(result.removed.to_dict(), record_path)
        result.record_path = record_path
        logger.info(f"Removed overrides recorded in {record_path}")
    else:
        logger.info("No overrides found, nothing to record")

    return result


def load_removed_overrides(path: Path | str) -> RemovedOverrides | None:
    """Read a removed-overrides record.

    Returns:
        The record, or None when the file is absent or malformed
    """
    doc = load_json_document(path)
    if doc.state is DocumentState.ABSENT:
        return None
    if doc.state is DocumentState.MALFORMED:
        logger.warning(f"Ignoring unreadable overrides record {doc.path}: {doc.error}")
        return None
    return RemovedOverrides.from_dict(doc.data)
