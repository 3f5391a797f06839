"""Markdown summary of an override-removal run.

The summary lists the overrides that were removed (with npm registry links)
and the files the run changed. It becomes the pull request body in the
action.
"""

import json
from collections.abc import Callable
from functools import partial
from pathlib import Path
from typing import Any

from pnpm_overrides.exceptions import GitQueryError
from pnpm_overrides.git import DEFAULT_GIT_TIMEOUT, get_changed_files
from pnpm_overrides.overrides import RemovedOverrides, load_removed_overrides
from pnpm_overrides.package_names import registry_url
from pnpm_overrides.utils.constants import REMOVED_OVERRIDES_FILE, SUMMARY_FILE
from pnpm_overrides.utils.helpers import project_path
from pnpm_overrides.utils.logging import logger

# Called with staged=False, then staged=True
ChangedFilesQuery = Callable[[bool], list[str]]

TITLE = "# pnpm Overrides Management Summary"
INTRO = (
    "The following changes occurred after managing pnpm overrides and running "
    "`pnpm audit --fix`:"
)
GIT_ERROR_NOTE = "Error getting changed files"

CLOSING = """## Summary

- Removed overrides from configuration files
- Ran `pnpm install` to update lockfile
- Ran `pnpm audit --fix` to apply available fixes

This suggests that the overrides are no longer necessary as pnpm can now resolve dependencies and fix vulnerabilities without them.
"""


def _format_version(version: Any) -> str:
    if isinstance(version, str):
        return version
    return json.dumps(version, separators=(",", ":"))


def format_override_entry(key: str, version: Any) -> str:
    """Markdown bullet linking an override key to its registry page."""
    return f"- [`{key}`]({registry_url(key)}): `{_format_version(version)}`"


def _removed_section(removed: RemovedOverrides) -> list[str]:
    lines = [
        "## Previously Removed Overrides",
        "",
        "These overrides were temporarily removed to test if they're still necessary:",
        "",
    ]
    sections = [
        ("From package.json:", removed.package_json),
        ("From pnpm-workspace.yaml:", removed.workspace),
    ]
    for title, overrides in sections:
        if not overrides:
            continue
        lines.append(f"### {title}")
        lines.append("")
        lines.extend(format_override_entry(key, version) for key, version in overrides.items())
        lines.append("")
    return lines


def _changed_files_section(list_changed: ChangedFilesQuery) -> list[str]:
    lines = ["## Changed Files", ""]
    try:
        unstaged = list_changed(False)
        staged = list_changed(True)
    except GitQueryError as e:
        logger.warning(f"Could not list changed files: {e}")
        lines.append(GIT_ERROR_NOTE)
        return lines

    lines.extend(unstaged)
    lines.extend(staged)
    return lines


def render_summary(removed: RemovedOverrides | None, list_changed: ChangedFilesQuery) -> str:
    """Build the summary markdown.

    Args:
        removed: Removed-overrides record, or None if no record exists
        list_changed: Returns changed paths; raises GitQueryError on failure
    """
    lines = [TITLE, "", INTRO, ""]

    if removed is not None and not removed.is_empty():
        lines.extend(_removed_section(removed))

    lines.extend(_changed_files_section(list_changed))
    lines.append("")

    return "\n".join(lines) + "\n" + CLOSING


def write_summary(
    root: Path | str = ".",
    *,
    record_file: str = REMOVED_OVERRIDES_FILE,
    summary_file: str = SUMMARY_FILE,
    git_timeout: int = DEFAULT_GIT_TIMEOUT,
) -> Path:
    """Render the summary for a project and write it next to the record.

    Returns:
        Path of the written summary file
    """
    removed = load_removed_overrides(project_path(root, record_file))
    content = render_summary(removed, partial(get_changed_files, root, timeout=git_timeout))

    summary_path = project_path(root, summary_file)
    with open(summary_path, "w", encoding="utf-8") as f:
        f.write(content)

    logger.info(f"Summary written to {summary_path}")
    return summary_path
