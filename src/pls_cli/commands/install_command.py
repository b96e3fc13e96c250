"""Command 'install' of pls: shell start-up hook and background weather refresh."""

import subprocess
import sys
from pathlib import Path
from typing import Annotated

import typer

from pls_cli.models.exceptions import PlsError
from pls_cli.utils import exit_codes
from pls_cli.utils.logger import get_logger
from pls_cli.utils.ui.console import get_console
from pls_cli.utils.ui.formatters import format_success, format_warning

from .decorators import command_wrapper

SHELL_RC_FILES = {
    "fish": "~/.config/fish/config.fish",
    "bash": "~/.bashrc",
    "zsh": "~/.zshrc",
}
HOOK_LINE = "pls"
CRON_LINES = ["0 * * * * pls -r", "@reboot pls -r"]


def install_shell_hook(rc_file: Path) -> bool:
    """Append the pls hook to *rc_file*. Returns False if it was already there."""
    existing = rc_file.read_text(encoding="utf-8") if rc_file.exists() else ""
    if HOOK_LINE in existing.splitlines():
        return False
    rc_file.parent.mkdir(parents=True, exist_ok=True)
    with open(rc_file, "a", encoding="utf-8") as f:
        if existing and not existing.endswith("\n"):
            f.write("\n")
        f.write(f"{HOOK_LINE}\n")
    return True


def install_weather_cron() -> list[str]:
    """Merge the refresh entries into the user's crontab.

    Returns:
        The entries that were added

    Raises:
        PlsError: If crontab is missing or rejects the new table
    """
    try:
        current = subprocess.run(
            ["crontab", "-l"], capture_output=True, text=True, check=False
        )
    except FileNotFoundError as e:
        raise PlsError("'crontab' command not found") from e

    # crontab -l fails when the user has no table yet
    lines = current.stdout.splitlines() if current.returncode == 0 else []
    added = [line for line in CRON_LINES if line not in lines]
    if not added:
        return []

    new_table = "\n".join(lines + added) + "\n"
    result = subprocess.run(
        ["crontab", "-"], input=new_table, capture_output=True, text=True, check=False
    )
    if result.returncode != 0:
        raise PlsError(f"crontab rejected the new entries: {result.stderr.strip()}")
    return added


@command_wrapper
def install(
    target: Annotated[
        str, typer.Argument(help="fish, bash, zsh, or weather (background refresh)")
    ],
) -> None:
    """Install into shell, or install a crontab entry refreshing the weather hourly."""
    console = get_console()
    if sys.platform == "win32":
        format_warning("Installing is only supported on Linux and macOS!")
        return

    target = target.lower()
    if target in SHELL_RC_FILES:
        rc_file = Path(SHELL_RC_FILES[target]).expanduser()
        if install_shell_hook(rc_file):
            get_logger().info("added pls hook to %s", rc_file)
            format_success(f"pls will now greet you in every new {target} shell ({rc_file})")
        else:
            console.print(f"[yellow]pls is already installed in {rc_file}[/yellow]")
    elif target == "weather":
        added = install_weather_cron()
        if added:
            format_success("Weather will now refresh in the background every hour and on boot")
        else:
            console.print("[yellow]Background weather refresh is already installed[/yellow]")
    else:
        raise PlsError(
            "Must be fish, bash, zsh, or weather (to install the weather background update service)!",
            exit_codes.ERROR_INVALID_ARGS,
        )
