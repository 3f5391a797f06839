"""Write the markdown summary of an override-removal run."""

import click

from pnpm_overrides.cli import RichCommand
from pnpm_overrides.utils.error_handler import handle_exceptions


@click.command(cls=RichCommand)
@handle_exceptions
@click.option("--root", default=".", help="Project root directory (a git work tree)")
@click.option(
    "--record", default=None, help="Removed-overrides record (default: removed-overrides.json)"
)
@click.option("--out", default=None, help="Summary file (default: override-removal-summary.md)")
def summary(root, record, out):
    """Generate the override removal summary used as the PR body.

    Sections:
      - Previously Removed Overrides (only when the record lists any),
        with npm registry links
      - Changed Files (git diff, then git diff --cached)
      - Summary of the remove / install / audit-fix steps

    If git cannot list changed files the section says so instead of
    failing the step."""
    from pnpm_overrides.config_runtime import load_runtime_config
    from pnpm_overrides.summary import write_summary
    from pnpm_overrides.ui import console

    cfg = load_runtime_config(root)
    paths = cfg["paths"]

    write_summary(
        root,
        record_file=record or paths["removed_record"],
        summary_file=out or paths["summary"],
        git_timeout=cfg["timeouts"]["git"],
    )

    console.print("Generated override removal summary", highlight=False)
