"""Remove overrides from package.json and pnpm-workspace.yaml."""

import click

from pnpm_overrides.cli import RichCommand
from pnpm_overrides.utils.error_handler import handle_exceptions


@click.command(cls=RichCommand)
@handle_exceptions
@click.option("--root", default=".", help="Project root directory")
@click.option("--package-json", default=None, help="Manifest file (default: package.json)")
@click.option(
    "--workspace-file", default=None, help="Workspace file (default: pnpm-workspace.yaml)"
)
@click.option(
    "--record", default=None, help="Removed-overrides record (default: removed-overrides.json)"
)
def remove(root, package_json, workspace_file, record):
    """Strip the overrides key from package.json and pnpm-workspace.yaml.

    Everything else in both files is kept, in the same key order. The
    removed entries are written to the record file for the summary step.
    Running it again on already-stripped files changes nothing.

    Behavior:
      - package.json is required; a missing or broken file fails the step
      - pnpm-workspace.yaml is optional; a broken file is only a warning
      - No record is written when neither file has overrides

    Examples:
      pnpm-overrides remove
      pnpm-overrides remove --root packages/app

    Output Files:
      removed-overrides.json   # {"packageJson": {...}, "workspace": {...}}"""
    from pnpm_overrides.config_runtime import load_runtime_config
    from pnpm_overrides.overrides import strip_overrides
    from pnpm_overrides.ui import console, print_warning

    paths = load_runtime_config(root)["paths"]

    result = strip_overrides(
        root,
        package_json=package_json or paths["package_json"],
        workspace_file=workspace_file or paths["workspace_file"],
        record_file=record or paths["removed_record"],
    )

    for warning in result.warnings:
        print_warning(warning)

    if not result.modified:
        console.print("No overrides found in package.json or pnpm-workspace.yaml", highlight=False)
        return

    if result.package_json_modified:
        console.print("Removed overrides from package.json", highlight=False)
    if result.workspace_modified:
        console.print("Removed overrides from pnpm-workspace.yaml", highlight=False)
