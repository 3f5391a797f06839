"""Centralized exit codes for the pnpm-overrides CLI.

0 is success and 1 is any failure reported through click.ClickException;
click itself uses 2 for usage errors.
"""


class ExitCodes:
    """Exit codes set explicitly by pnpm-overrides commands."""

    ACTION_INVALID = 3
