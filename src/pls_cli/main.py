"""Main entry point for pls."""

import signal
import sys
from typing import Annotated

import typer

from pls_cli import __version__
from pls_cli.commands import config, install_command, tasks
from pls_cli.commands.decorators import command_wrapper
from pls_cli.commands.onboarding import run_onboarding
from pls_cli.core.app_context import build_app_context
from pls_cli.utils.typer_helpers import AliasGroup
from pls_cli.utils.ui.console import get_console

app = typer.Typer(
    name="pls",
    cls=AliasGroup,
    help="Greets you, shows the weather and keeps your todo list",
    invoke_without_command=True,
    no_args_is_help=False,
)


def _version_callback(value: bool) -> None:
    if value:
        get_console().print(f"[bold]pls[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
@command_wrapper
def pls(
    ctx: typer.Context,
    refresh: Annotated[
        bool, typer.Option("--refresh", "-r", help="Force refresh of weather")
    ] = False,
    all_: Annotated[
        bool, typer.Option("--all", "-a", help="Apply change to all tasks")
    ] = False,
    quiet: Annotated[
        bool, typer.Option("--quiet", "-q", help="Do not print anything")
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """Greet you with the weather and your tasks when run without a command."""
    console = get_console()
    console.quiet = quiet

    app_ctx = build_app_context(apply_all=all_, force_refresh=refresh, quiet=quiet)
    ctx.obj = app_ctx

    # NO_COLOR in the environment still wins over output.color = true
    if not app_ctx.settings.settings.output.color:
        console.no_color = True

    # The background refresh runs without a terminal to answer questions
    if not quiet:
        run_onboarding(app_ctx)

    if ctx.invoked_subcommand is None:
        tasks.show_dashboard(app_ctx, full_greet=True)


app.command("add")(tasks.add)
app.command("do")(tasks.do)
app.command("undo")(tasks.undo)
app.command("rm")(tasks.rm)
app.command("list")(tasks.list_tasks)
app.command("clean")(tasks.clean)
app.command("install")(install_command.install)
app.add_typer(config.app, name="config", help="Configuration management")


def _handle_interrupt(signum, frame) -> None:
    get_console().show_cursor(True)
    sys.exit(0)


# Main entry point
def main():
    """Main entry point."""
    signal.signal(signal.SIGINT, _handle_interrupt)
    app()


if __name__ == "__main__":
    main()
