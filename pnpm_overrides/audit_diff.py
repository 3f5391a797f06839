"""Compare ``pnpm audit --json`` reports taken with and without overrides.

Advisory ids are not stable between audit runs, so advisories are compared by
fingerprint: ``module_name@vulnerable_versions``. An issue present with
overrides but gone without them is taken to be fixed upstream; an issue that
only appears without overrides is one the overrides still protect against.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pnpm_overrides.documents import DocumentState, load_json_document
from pnpm_overrides.outputs import OutputSink
from pnpm_overrides.utils.constants import AUDIT_DIFF_FILE, AUDIT_WITH_FILE, AUDIT_WITHOUT_FILE
from pnpm_overrides.utils.helpers import project_path
from pnpm_overrides.utils.logging import logger

DECISION_OUTPUT_KEY = "can_remove_overrides"

REMOVED_HEADER = "=== Removed Issues (now fixed upstream) ==="
NEW_HEADER = "=== New Issues (appear without overrides) ==="


def advisory_fingerprint(advisory: Any) -> str | None:
    """Return ``module_name@vulnerable_versions`` or None if either is missing."""
    if not isinstance(advisory, dict):
        return None
    module_name = advisory.get("module_name")
    vulnerable_versions = advisory.get("vulnerable_versions")
    if module_name is None or vulnerable_versions is None:
        return None
    return f"{module_name}@{vulnerable_versions}"


def fingerprint_report(report: Any) -> list[str]:
    """Project an audit report to its sorted, de-duplicated fingerprints."""
    if not isinstance(report, dict):
        return []

    advisories = report.get("advisories")
    if not isinstance(advisories, dict):
        return []

    fingerprints = set()
    for advisory_id, advisory in advisories.items():
        fingerprint = advisory_fingerprint(advisory)
        if fingerprint is None:
            logger.debug(f"Skipping advisory {advisory_id}: no module_name/vulnerable_versions")
            continue
        fingerprints.add(fingerprint)

    return sorted(fingerprints)


def load_audit_fingerprints(path: Path | str) -> list[str]:
    """Read an audit report; a missing or broken file counts as no advisories."""
    doc = load_json_document(path)
    if doc.state is DocumentState.ABSENT:
        logger.warning(f"Audit report {doc.path} not found, treating it as empty")
        return []
    if doc.state is DocumentState.MALFORMED:
        logger.warning(f"Audit report {doc.path} could not be parsed, treating it as empty")
        return []
    return fingerprint_report(doc.data)


@dataclass
class AuditDiff:
    """Fingerprints that differ between the two audit runs."""

    removed: list[str] = field(default_factory=list)
    new: list[str] = field(default_factory=list)

    @property
    def can_remove_overrides(self) -> bool:
        """Overrides are removable when dropping them fixed something and broke nothing."""
        return bool(self.removed) and not self.new

    def render(self) -> str:
        return "\n".join([REMOVED_HEADER, *self.removed, "", NEW_HEADER, *self.new])


def diff_audits(with_overrides: list[str], without_overrides: list[str]) -> AuditDiff:
    """Compute removed and new issues between two fingerprint lists."""
    with_set = set(with_overrides)
    without_set = set(without_overrides)
    return AuditDiff(
        removed=sorted(with_set - without_set),
        new=sorted(without_set - with_set),
    )


def compare_audits(
    root: Path | str,
    sink: OutputSink,
    *,
    with_report: str = AUDIT_WITH_FILE,
    without_report: str = AUDIT_WITHOUT_FILE,
    diff_file: str = AUDIT_DIFF_FILE,
) -> AuditDiff:
    """Diff the two reports, write the diff file and publish the decision.

    Args:
        root: Project root the report paths are relative to
        sink: Receives ``can_remove_overrides=true|false``
        with_report: Audit taken with overrides in place
        without_report: Audit taken after overrides were removed
        diff_file: Plain-text diff output

    Returns:
        The computed AuditDiff
    """
    diff = diff_audits(
        load_audit_fingerprints(project_path(root, with_report)),
        load_audit_fingerprints(project_path(root, without_report)),
    )

    diff_path = project_path(root, diff_file)
    with open(diff_path, "w", encoding="utf-8") as f:
        f.write(diff.render())

    logger.info(
        f"Audit diff: {len(diff.removed)} removed, {len(diff.new)} new, written to {diff_path}"
    )

    sink.set_output(DECISION_OUTPUT_KEY, "true" if diff.can_remove_overrides else "false")
    return diff
