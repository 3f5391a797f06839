"""Compare audit reports taken with and without overrides."""

import click

from pnpm_overrides.cli import RichCommand
from pnpm_overrides.utils.error_handler import handle_exceptions


@click.command(cls=RichCommand)
@handle_exceptions
@click.option("--root", default=".", help="Project root directory")
@click.option("--with-report", default=None, help="Audit with overrides (default: audit-with.json)")
@click.option(
    "--without-report", default=None, help="Audit without overrides (default: audit-without.json)"
)
@click.option("--diff-file", default=None, help="Diff output (default: audit-diff.txt)")
@click.option(
    "--github-output",
    default=None,
    type=click.Path(dir_okay=False),
    help="Step output file (default: $GITHUB_OUTPUT)",
)
def compare(root, with_report, without_report, diff_file, github_output):
    """Decide whether the overrides can be dropped.

    Both reports are `pnpm audit --json` output. Advisories are compared by
    module name and vulnerable range. A missing or unparseable report counts
    as having no advisories.

    Decision:
      can_remove_overrides=true   removing overrides fixed issues and added none
      can_remove_overrides=false  anything else (including no difference)

    The decision is appended to the GitHub step output file; the command
    fails if neither --github-output nor GITHUB_OUTPUT is set.

    Output Files:
      audit-diff.txt   # removed issues, then new issues, one per line"""
    from pnpm_overrides.audit_diff import DECISION_OUTPUT_KEY, compare_audits
    from pnpm_overrides.config_runtime import load_runtime_config
    from pnpm_overrides.outputs import GithubOutputFile, github_output_from_env
    from pnpm_overrides.ui import console, print_plain

    paths = load_runtime_config(root)["paths"]
    sink = GithubOutputFile(github_output) if github_output else github_output_from_env()

    diff = compare_audits(
        root,
        sink,
        with_report=with_report or paths["audit_with"],
        without_report=without_report or paths["audit_without"],
        diff_file=diff_file or paths["audit_diff"],
    )

    print_plain(diff.render())

    decision = "true" if diff.can_remove_overrides else "false"
    style = "success" if diff.can_remove_overrides else "info"
    console.print(f"\n[{style}]{DECISION_OUTPUT_KEY}={decision}[/{style}]", highlight=False)
