"""Typer-based CLI entry point."""

from __future__ import annotations

import functools
from pathlib import Path
from typing import Optional

import typer
from rich import print
from rich.table import Table
from rich.console import Console

from .appctx import AppContext
from .config import TEST_HUD_COUNT
from .devtools import generate_test_huds
from .errors import HudManagerError, HudNotFoundError
from .utils.logging import configure_logging

app = typer.Typer(help="Switch and organise HUDs in a game's custom folder")


class _Options:
    def __init__(self, root: Optional[Path], settings: Optional[Path], verbose: bool) -> None:
        self.root = root
        self.settings = settings
        self.verbose = verbose
        self._context: Optional[AppContext] = None

    def context(self) -> AppContext:
        """Build the app context and load the library on first use."""

        if self._context is None:
            context = AppContext.create(settings_path=self.settings, root=self.root)
            if self.verbose:
                configure_logging("DEBUG")
            context.initialize_library()
            self._context = context
        return self._context


def _handle_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except HudManagerError as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(1) from exc

    return wrapper


@app.callback()
def main(
    ctx: typer.Context,
    root: Optional[Path] = typer.Option(
        None, "--root", help="Content root to manage instead of the detected one."
    ),
    settings: Optional[Path] = typer.Option(
        None, "--settings", help="Path of the settings file to use."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output."),
) -> None:
    ctx.obj = _Options(root, settings, verbose)


@app.command("list")
@_handle_errors
def list_huds(ctx: typer.Context) -> None:
    """List HUDs, favorites first."""

    library = ctx.obj.context().library
    table = Table()
    table.add_column("")
    table.add_column("HUD", no_wrap=True)
    table.add_column("Location", overflow="fold")
    active = library.active
    for hud in library:
        marker = "★" if hud.favorite else "☆"
        name = f"[bold green]{hud.name}[/]" if active and hud.name == active.name else hud.name
        table.add_row(marker, name, str(hud.location))
    Console().print(table)
    if active is None:
        print("[yellow]No active HUD")


@app.command()
@_handle_errors
def activate(ctx: typer.Context, name: str) -> None:
    """Move NAME into the content root, parking the current HUD."""

    library = ctx.obj.context().library
    try:
        library.activate(name)
    finally:
        library.scan()
    print(f"[green]Activated {name}")


def _set_favorite(ctx: typer.Context, name: str, value: bool) -> None:
    library = ctx.obj.context().library
    library.set_favorite(name, value)
    saved = library.save_favorites()
    print(f"[green]{len(saved)} favorite HUD(s)")


@app.command()
@_handle_errors
def favorite(ctx: typer.Context, name: str) -> None:
    """Mark NAME as a favorite."""

    _set_favorite(ctx, name, True)


@app.command()
@_handle_errors
def unfavorite(ctx: typer.Context, name: str) -> None:
    """Remove NAME from the favorites."""

    _set_favorite(ctx, name, False)


@app.command()
@_handle_errors
def search(ctx: typer.Context, query: str) -> None:
    """Print the HUD names most relevant to QUERY."""

    context = ctx.obj.context()
    names = context.library.names()
    results = context.search.filter(query, names)
    for name in names:
        if results is None or name in results:
            typer.echo(name)


@app.command()
@_handle_errors
def reveal(ctx: typer.Context, name: Optional[str] = typer.Argument(None)) -> None:
    """Open the folder of NAME (or of the active HUD) in the file manager."""

    library = ctx.obj.context().library
    if name is None:
        if library.active is None:
            raise HudNotFoundError("no active hud")
        hud = library.active
    else:
        hud = library.get(name)
    typer.launch(str(hud.location))


@app.command("gen-test-huds")
def gen_test_huds(
    count: int = typer.Option(TEST_HUD_COUNT, "--count", "-n", min=1),
    target: Optional[Path] = typer.Option(
        None, "--target", help="Directory that receives `custom/huds` (default: current directory)."
    ),
) -> None:
    """Create HUD folders for manual testing."""

    base = target if target is not None else Path.cwd()
    created = generate_test_huds(base, count)
    print(f"[green]Created {len(created)} HUD folder(s) under {base}")


if __name__ == "__main__":  # pragma: no cover
    app()
