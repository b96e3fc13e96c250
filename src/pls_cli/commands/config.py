"""Configuration management commands."""

from typing import Annotated

import typer
from pydantic import ValidationError
from rich.table import Table

from pls_cli.core.app_context import get_app_context
from pls_cli.utils import exit_codes
from pls_cli.utils.ui.console import get_console
from pls_cli.utils.ui.formatters import format_error, format_success

from .decorators import command_wrapper

app = typer.Typer(help="Configuration management commands")


def _flatten(data: dict, prefix: str = "") -> list[tuple[str, object]]:
    rows = []
    for key, value in data.items():
        name = f"{prefix}{key}"
        if isinstance(value, dict):
            rows.extend(_flatten(value, f"{name}."))
        else:
            rows.append((name, value))
    return rows


@app.command("show")
@command_wrapper
def show_config(ctx: typer.Context) -> None:
    """Show current settings."""
    settings = get_app_context(ctx).settings.settings
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")
    for key, value in _flatten(settings.model_dump()):
        table.add_row(key, str(value))
    get_console().print(table)


@app.command("get")
@command_wrapper
def get_config(
    ctx: typer.Context,
    key: Annotated[str, typer.Argument(help="Setting key (e.g., weather.threshold)")],
) -> None:
    """Get a setting value."""
    value = get_app_context(ctx).settings.get(key)
    if value is None:
        format_error(f"Configuration key '{key}' not found")
        raise typer.Exit(exit_codes.ERROR_INVALID_ARGS)
    get_console().print(value)


@app.command("set")
@command_wrapper
def set_config(
    ctx: typer.Context,
    key: Annotated[str, typer.Argument(help="Setting key (e.g., weather.threshold)")],
    value: Annotated[str, typer.Argument(help="New value")],
) -> None:
    """Set a setting value."""
    parsed_value: str | int | bool = value
    if value.lower() in ("true", "false"):
        parsed_value = value.lower() == "true"
    elif value.isdigit():
        parsed_value = int(value)

    try:
        get_app_context(ctx).settings.set(key, parsed_value)
    except KeyError:
        format_error(f"Configuration key '{key}' not found")
        raise typer.Exit(exit_codes.ERROR_INVALID_ARGS) from None
    except ValidationError as e:
        format_error(f"Invalid value for '{key}': {e.errors()[0]['msg']}")
        raise typer.Exit(exit_codes.ERROR_INVALID_ARGS) from None
    format_success(f"Configuration '{key}' set to '{parsed_value}'")


@app.command("reset")
@command_wrapper
def reset_config(
    ctx: typer.Context,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
) -> None:
    """Reset settings to defaults."""
    if not yes and not typer.confirm("Are you sure you want to reset all settings?"):
        format_error("Cancelled")
        raise typer.Exit(0)
    get_app_context(ctx).settings.reset()
    format_success("Configuration reset to defaults")
