"""Per-invocation wiring of the store and the services built on it.

One :class:`AppContext` is built by the root command and handed to every
subcommand through ``typer.Context.obj``; nothing in the core holds global
state.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from pls_cli.config import SettingsManager, get_store_path
from pls_cli.repositories.store import KeyValueStore
from pls_cli.repositories.task_repository import TaskRepository
from pls_cli.services.profile_service import ProfileService
from pls_cli.services.weather_service import WeatherService
from pls_cli.utils.refresh_marker import RefreshMarker


@dataclass
class AppContext:
    store: KeyValueStore
    settings: SettingsManager
    tasks: TaskRepository
    profile: ProfileService
    weather: WeatherService
    apply_all: bool = False
    force_refresh: bool = False
    quiet: bool = False


def build_app_context(
    store_path: Path | None = None,
    *,
    apply_all: bool = False,
    force_refresh: bool = False,
    quiet: bool = False,
) -> AppContext:
    """Open the store and build the services on top of it.

    Raises:
        StoreError: If an existing store file cannot be read
    """
    store = KeyValueStore.load_or_new(store_path or get_store_path())
    settings = SettingsManager(store)
    weather_config = settings.settings.weather
    return AppContext(
        store=store,
        settings=settings,
        tasks=TaskRepository(store),
        profile=ProfileService(store),
        weather=WeatherService(
            store,
            weather_config,
            marker=RefreshMarker(ttl=weather_config.refresh_lock_ttl),
        ),
        apply_all=apply_all,
        force_refresh=force_refresh,
        quiet=quiet,
    )


def get_app_context(ctx: typer.Context) -> AppContext:
    """Fetch the context built by the root command."""
    app_ctx = ctx.find_object(AppContext)
    if app_ctx is None:
        raise RuntimeError("pls context was not initialised")
    return app_ctx
