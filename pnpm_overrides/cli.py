"""pnpm-overrides CLI - main entry point and command registration hub."""
# ruff: noqa: E402 - Intentional lazy loading: commands imported after cli group definition

import inspect

import click
from rich.table import Table

from pnpm_overrides import __version__
from pnpm_overrides.ui import console


class RichCommand(click.Command):
    """Command whose help text keeps the docstring's own line breaks."""

    def format_help_text(self, ctx, formatter):
        text = inspect.cleandoc(self.help or "")
        if not text:
            return
        formatter.write_paragraph()
        with formatter.indentation():
            for line in text.splitlines():
                formatter.write(f"{'':>{formatter.current_indent}}{line}\n" if line else "\n")


class VerboseGroup(click.Group):
    """Help output grouped by the workflow step each command belongs to."""

    COMMAND_CATEGORIES = {
        "WORKFLOW": {
            "title": "WORKFLOW STEPS",
            "description": "Run in this order by action.yml",
            "commands": ["remove", "compare", "summary"],
            "command_meta": {
                "remove": {"run_when": "After the first audit, before pnpm install"},
                "compare": {"run_when": "After the audit without overrides"},
                "summary": {"run_when": "After pnpm audit --fix, before opening the PR"},
            },
        },
        "MAINTENANCE": {
            "title": "MAINTENANCE",
            "description": "Checks for the action itself",
            "commands": ["lint-action"],
            "command_meta": {
                "lint-action": {"use_when": "Editing action.yml"},
            },
        },
    }

    def format_commands(self, ctx, formatter):
        """Suppress click's flat listing; format_help prints the grouped one."""
        pass

    def format_help(self, ctx, formatter):
        super().format_help(ctx, formatter)

        registered = {
            name: cmd for name, cmd in self.commands.items() if not getattr(cmd, "hidden", False)
        }

        console.print()
        console.rule("[bold]COMMANDS[/bold]", characters="-")

        for category in self.COMMAND_CATEGORIES.values():
            console.print(f"\n[bold cyan]{category['title']}[/bold cyan]")
            console.print(f"[dim]{category['description']}[/dim]")

            table = Table(show_header=False, box=None, padding=(0, 2, 0, 0))
            table.add_column("Command", style="cmd", width=14)
            table.add_column("Description", style="white", overflow="fold")
            table.add_column("When", style="dim", width=44, overflow="fold")

            for cmd_name in category["commands"]:
                if cmd_name not in registered:
                    continue
                short_help = registered[cmd_name].get_short_help_str(limit=45)
                meta = category["command_meta"].get(cmd_name, {})
                hint = ""
                if "use_when" in meta:
                    hint = f"USE: {meta['use_when']}"
                elif "run_when" in meta:
                    hint = f"RUN: {meta['run_when']}"
                table.add_row(cmd_name, short_help, hint)

            console.print(table)

        console.print()
        console.print("For detailed options: [cmd]pnpm-overrides <command> --help[/cmd]")


@click.group(cls=VerboseGroup)
@click.version_option(version=__version__, prog_name="pnpm-overrides")
@click.help_option("-h", "--help")
def cli():
    """pnpm-overrides - check whether pnpm overrides are still needed

    \b
    TYPICAL RUN (see action.yml):
      pnpm audit --json > audit-with.json
      pnpm-overrides remove
      pnpm install && pnpm audit --json > audit-without.json
      pnpm-overrides compare
      pnpm audit --fix && pnpm-overrides summary"""
    pass


from pnpm_overrides.commands.compare import compare
from pnpm_overrides.commands.lint_action import lint_action
from pnpm_overrides.commands.remove import remove
from pnpm_overrides.commands.summary import summary

cli.add_command(remove)
cli.add_command(compare)
cli.add_command(summary)
cli.add_command(lint_action)


def main():
    """Main entry point for console script."""
    cli()


if __name__ == "__main__":
    main()
