"""Output formatters for pls."""

from rich.markup import escape
from rich.table import Table

from pls_cli.models.task import Task
from pls_cli.utils.ui.console import get_console


def format_error(message: str) -> None:
    """Format and display an error message."""
    get_console().print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    get_console().print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    get_console().print(f"[bold yellow]Warning:[/bold yellow] {message}")


def task_summary(tasks: list[Task]) -> str:
    pending = sum(1 for task in tasks if not task.completed)
    completed = len(tasks) - pending
    return (
        f"You have [red]{pending}[/red] pending tasks and "
        f"[green]{completed}[/green] completed tasks!"
    )


def build_task_table(tasks: list[Task]) -> Table:
    """Build the task table, or a single congratulation row when empty."""
    table = Table(show_header=bool(tasks), header_style="bold italic yellow")

    if not tasks:
        table.add_column("", justify="center")
        table.add_row("[green]Congrats! You are up to date![/green]")
        return table

    table.add_column("#", justify="center", style="green")
    table.add_column("Title", justify="center", style="green")
    table.add_column("Status", justify="center")

    for i, task in enumerate(tasks, start=1):
        status = (
            "[green]✅ | Completed![/green]"
            if task.completed
            else "[red]❌ | Uncompleted![/red]"
        )
        table.add_row(str(i), escape(task.title), status)
    return table


def print_tasks(tasks: list[Task]) -> None:
    """Render the task table."""
    console = get_console()
    console.print()
    console.print(task_summary(tasks))
    console.print(build_task_table(tasks))
