"""First-run questions: name, weather and an optional specific location."""

import typer
from rich.markup import escape

from pls_cli.core.app_context import AppContext
from pls_cli.utils.ui.console import get_console


def run_onboarding(app_ctx: AppContext) -> None:
    """Ask for whatever profile fields are still missing and store them."""
    console = get_console()
    profile = app_ctx.profile

    if not profile.has_name():
        name = typer.prompt(typer.style("Hello! What can I call you?", fg="blue"))
        console.print(
            f"[green]Nice to meet you, {escape(name)}! "
            "I'll write that down and make sure I don't forget it.[/green]"
        )
        profile.set_name(name)

    if profile.has_weather_choice():
        return

    weather = typer.confirm(
        typer.style(
            "Would you like to display the weather based on your IP location "
            "each time you open the terminal?",
            fg="blue",
        )
    )
    profile.set_weather(weather)
    if not weather:
        return

    with console.status("Checking your weather..."):
        location = app_ctx.weather.locate()
    console.print(
        f"Your estimated location is: [yellow]{escape(location) or 'unknown'}[/yellow]. "
        "If this is incorrect, you can save a more specific location now."
    )
    if typer.confirm(
        typer.style(
            "Would you like to save a more specific location (ex: your exact city)?",
            fg="cyan",
        )
    ):
        specific_location = typer.prompt(
            typer.style("Enter a more specific location", fg="blue")
        )
        profile.set_specific_location(specific_location)
