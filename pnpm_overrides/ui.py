"""Central UI handler for pnpm-overrides.

Single source of truth for Rich console styling. Import this instead of
instantiating Console() in every command file.

Usage:
    from pnpm_overrides.ui import console, print_warning

    console.print("[success]Overrides removed[/success]")
    print_warning("Could not parse pnpm-workspace.yaml")
"""

import sys

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

OVERRIDES_THEME = Theme({
    "info": "bold cyan",
    "warning": "bold yellow",
    "error": "bold red",
    "success": "bold green",
    "cmd": "bold magenta",
    "path": "bold cyan",
    "dim": "dim white",
})

# Single console instance - import this, don't create your own
console = Console(
    theme=OVERRIDES_THEME,
    force_terminal=sys.stdout.isatty(),
)


def print_error(msg: str) -> None:
    console.print(f"[error]ERROR:[/error] {escape(msg)}", highlight=False)


def print_warning(msg: str) -> None:
    console.print(f"[warning]WARNING:[/warning] {escape(msg)}", highlight=False)


def print_success(msg: str) -> None:
    console.print(f"[success]OK:[/success] {escape(msg)}", highlight=False)


def print_plain(text: str) -> None:
    """Print machine-readable text exactly as given (no markup, no wrapping)."""
    console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)
