"""Typer helper utilities."""

from difflib import get_close_matches

import typer
from typer.core import TyperGroup

from pls_cli.utils.ui.console import get_console


class AliasGroup(TyperGroup):
    """Typer group that resolves command aliases and suggests commands on typos."""

    aliases: dict[str, str] = {
        "done": "do",
        "undone": "undo",
        "remove": "rm",
        "del": "rm",
        "delete": "rm",
        "ls": "list",
        "all": "list",
    }

    def get_command(self, ctx, cmd_name):
        return super().get_command(ctx, self.aliases.get(cmd_name, cmd_name))

    def resolve_command(self, ctx, args):
        """Override to provide command suggestions on errors."""
        try:
            return super().resolve_command(ctx, args)
        except Exception as e:
            if args:
                attempted = args[0]
                available_commands = list(self.commands.keys()) + list(self.aliases)

                suggestions = get_close_matches(
                    attempted, available_commands, n=3, cutoff=0.6
                )

                if suggestions:
                    console = get_console()
                    console.print(
                        f'[red]Error:[/red] unknown command "{attempted}" for "{ctx.info_name}"'
                    )
                    console.print()
                    if len(suggestions) == 1:
                        console.print("[yellow]Did you mean this?[/yellow]")
                    else:
                        console.print("[yellow]Did you mean one of these?[/yellow]")
                    for suggestion in suggestions:
                        console.print(f"        {suggestion}")
                    raise typer.Exit(1) from e
            raise
