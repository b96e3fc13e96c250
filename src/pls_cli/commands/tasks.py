"""Task commands: add, do, undo, rm, list and clean.

Every command ends by showing the task table, even when the task it was asked
to change does not exist.
"""

from typing import Annotated

import typer
from rich.markup import escape

from pls_cli.core.app_context import AppContext, get_app_context
from pls_cli.models.exceptions import PlsError, WeatherFetchError
from pls_cli.services.greeting_service import build_greeting
from pls_cli.utils import exit_codes
from pls_cli.utils.ui.console import get_console
from pls_cli.utils.ui.formatters import format_error, format_warning, print_tasks

from .decorators import command_wrapper

NOT_FOUND_MESSAGE = "Task not found. Are you sure a task exists with that number?"

IndexArgument = Annotated[
    int | None,
    typer.Argument(min=1, help="Task number as shown in the list"),
]
AllOption = Annotated[
    bool, typer.Option("--all", "-a", help="Apply change to all tasks")
]


def show_dashboard(app_ctx: AppContext, full_greet: bool = False) -> None:
    """Print the greeting and weather (when *full_greet*) followed by the tasks."""
    console = get_console()
    if full_greet:
        profile = app_ctx.profile.get_profile()
        greeting = build_greeting(profile.name if profile else None)
        console.print()
        console.print(f"[green]{escape(greeting)}[/green]\n")

        if app_ctx.profile.weather_enabled():
            try:
                weather = app_ctx.weather.get_weather(app_ctx.force_refresh)
            except WeatherFetchError as e:
                console.print(f"[red]Failed to fetch weather :( {escape(str(e))}[/red]")
            else:
                if weather:
                    console.print(f"[blue]{escape(weather)}[/blue]\n")

    print_tasks(app_ctx.tasks.list())


@command_wrapper
def add(
    ctx: typer.Context,
    text: Annotated[str | None, typer.Argument(help="Task title")] = None,
) -> None:
    """Add task to todo."""
    app_ctx = get_app_context(ctx)
    if text is None:
        text = typer.prompt("Enter task")
    text = text.strip()
    if not text:
        raise PlsError("Task text is required", exit_codes.ERROR_INVALID_ARGS)

    get_console().print(f"Adding task [yellow]{escape(text)}[/yellow] to list...")
    app_ctx.tasks.add(text)
    show_dashboard(app_ctx)


def _set_completed(app_ctx: AppContext, index: int | None, value: bool, apply_all: bool) -> None:
    console = get_console()
    label = "done" if value else "undone"

    if apply_all or app_ctx.apply_all:
        console.print(f"[red]Marking all tasks as {label}...[/red]")
        app_ctx.tasks.set_completed_all(value)
        return

    if index is None:
        # Without a number, act on the first task that can change.
        index = app_ctx.tasks.first_index(completed=not value)
        if index is None:
            format_warning(f"No task left to mark as {label}.")
            return

    console.print(f"Marking task [yellow]{index}[/yellow] from list as {label}...")
    if not app_ctx.tasks.set_completed(index, value):
        format_error(NOT_FOUND_MESSAGE)


@command_wrapper
def do(
    ctx: typer.Context,
    index: IndexArgument = None,
    all_: AllOption = False,
) -> None:
    """Mark task as done (defaults to the first pending task)."""
    app_ctx = get_app_context(ctx)
    _set_completed(app_ctx, index, True, all_)
    show_dashboard(app_ctx)


@command_wrapper
def undo(
    ctx: typer.Context,
    index: IndexArgument = None,
    all_: AllOption = False,
) -> None:
    """Mark task as undone (defaults to the first completed task)."""
    app_ctx = get_app_context(ctx)
    _set_completed(app_ctx, index, False, all_)
    show_dashboard(app_ctx)


@command_wrapper
def rm(
    ctx: typer.Context,
    index: IndexArgument = None,
    all_: AllOption = False,
) -> None:
    """Remove task."""
    app_ctx = get_app_context(ctx)
    console = get_console()

    if all_ or app_ctx.apply_all:
        console.print("[red]Removing all tasks...[/red]")
        app_ctx.tasks.remove_all()
    elif index is None:
        raise PlsError(
            "Give the number of the task to remove, or --all to remove every task",
            exit_codes.ERROR_INVALID_ARGS,
        )
    else:
        console.print(f"Removing task [yellow]{index}[/yellow]...")
        if not app_ctx.tasks.remove(index):
            format_error(NOT_FOUND_MESSAGE)

    show_dashboard(app_ctx)


@command_wrapper
def list_tasks(ctx: typer.Context) -> None:
    """List tasks."""
    show_dashboard(get_app_context(ctx))


@command_wrapper
def clean(ctx: typer.Context) -> None:
    """Clean all completed tasks."""
    app_ctx = get_app_context(ctx)
    console = get_console()
    console.print("[blue]Clearing all completed tasks[/blue]")
    removed = app_ctx.tasks.clean()
    console.print(f"Cleaned [green]{removed}[/green] completed tasks!")
    show_dashboard(app_ctx)
