"""Validate the composite action definition."""

import sys
from pathlib import Path

import click

from pnpm_overrides.cli import RichCommand
from pnpm_overrides.utils.error_handler import handle_exceptions
from pnpm_overrides.utils.exit_codes import ExitCodes


@click.command("lint-action", cls=RichCommand)
@handle_exceptions
@click.option("--root", default=".", help="Directory containing action.yml")
@click.option("--action", "action_file", default="action.yml", help="Action metadata file")
@click.pass_context
def lint_action(ctx, root, action_file):
    """Check action.yml for structural mistakes.

    Checks:
      - name, description, author and runs are present
      - runs.using is composite and runs.steps is a list
      - every run step declares a shell
      - every pnpm-overrides call names an existing command
      - no deprecated ::set-output workflow commands

    Exit Codes:
      0 = action.yml is valid
      3 = problems found"""
    from pnpm_overrides.action_lint import lint_action_metadata
    from pnpm_overrides.ui import print_error, print_success

    path = Path(root) / action_file
    known_commands = ctx.find_root().command.commands.keys()

    problems = lint_action_metadata(path, known_commands)
    if problems:
        for problem in problems:
            print_error(problem)
        sys.exit(ExitCodes.ACTION_INVALID)

    print_success(f"{action_file} structure validation passed")
