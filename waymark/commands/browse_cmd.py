"""\
Browse commands: open the full-screen browser, or print one screen.

Both commands share the same session setup: load config, load the library,
resolve the current location and the platform list limit.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from waymark.core.config import WaymarkConfig, load_config
from waymark.core.constraints import ListKind, StaticConstraintService
from waymark.core.location import FixedLocationProvider
from waymark.io.library import LibraryError, load_library
from waymark.model import Position, parse_position
from waymark.screens.bookmarks import BookmarksScreen, ScreenContext
from waymark.screens.console import render_template
from waymark.screens.navigation import ScreenStack
from waymark.store import MemoryBookmarkStore
from waymark.utils.profiling import is_profiling_enabled, print_profiling_summary


console = Console()


@dataclass
class Session:
    config: WaymarkConfig
    store: MemoryBookmarkStore
    location: FixedLocationProvider
    constraints: Optional[StaticConstraintService]


def configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def open_session(
    library: Path,
    *,
    here: Optional[str] = None,
    config_file: Optional[Path] = None,
    limit: Optional[int] = None,
) -> Session:
    """
    Build the collaborators for a browsing session.

    Raises:
        ValueError: Invalid config, location or library (LibraryError)
    """
    cfg = load_config(config_file)
    position: Optional[Position] = parse_position(here) if here else cfg.here
    store = load_library(library, default_color=cfg.default_icon_color)

    if limit is not None and limit <= 0:
        raise ValueError(f"--limit must be positive (got {limit})")
    reported = limit if limit is not None else cfg.list_limit
    constraints = StaticConstraintService({ListKind.LIST: reported}) if reported is not None else None

    return Session(
        config=cfg,
        store=store,
        location=FixedLocationProvider(position),
        constraints=constraints,
    )


def _open_or_exit(library: Path, here: Optional[str], config_file: Optional[Path], limit: Optional[int]) -> Session:
    try:
        return open_session(library, here=here, config_file=config_file, limit=limit)
    except LibraryError as e:
        console.print(f"[bold red]❌ Cannot load library:[/] {e}")
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"[bold red]❌ Error:[/] {e}")
        raise typer.Exit(1)


def list_screen(
    library: Path = typer.Argument(..., help="YAML library, GPX file, or directory of GPX files"),
    collection: Optional[str] = typer.Option(
        None, "--collection", "-c", help="Show the bookmarks of this collection id"
    ),
    here: Optional[str] = typer.Option(None, "--here", help="Current location as LAT,LON"),
    config_file: Optional[Path] = typer.Option(None, "--config", help="Config YAML file"),
    limit: Optional[int] = typer.Option(None, "--limit", help="List limit reported by the display"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Print the collections screen (or one collection's bookmarks)."""
    configure_logging(verbose)
    session = _open_or_exit(library, here, config_file, limit)

    stack = ScreenStack()
    context = ScreenContext(
        store=session.store,
        navigation=stack,
        location=session.location,
        constraints=session.constraints,
        map_surface=session.store.map_surface,
        config=session.config,
    )
    screen = BookmarksScreen(context)
    stack.push(screen)

    if collection is not None:
        if session.store.get_collection(collection) is None:
            console.print(f"[bold red]❌ Unknown collection:[/] {collection}")
            raise typer.Exit(1)
        screen = screen.child(collection)
        stack.push(screen)

    console.print(render_template(screen.render()))
    if is_profiling_enabled():
        print_profiling_summary()


def browse(
    library: Path = typer.Argument(..., help="YAML library, GPX file, or directory of GPX files"),
    here: Optional[str] = typer.Option(None, "--here", help="Current location as LAT,LON"),
    config_file: Optional[Path] = typer.Option(None, "--config", help="Config YAML file"),
    limit: Optional[int] = typer.Option(None, "--limit", help="List limit reported by the display"),
) -> None:
    """Launch the full-screen bookmark browser."""
    session = _open_or_exit(library, here, config_file, limit)
    try:
        from waymark.tui.app import WaymarkApp
    except Exception as e:  # pragma: no cover
        raise typer.Exit(f"Failed to import TUI dependencies: {e}")

    WaymarkApp(
        session.store,
        config=session.config,
        location=session.location,
        constraints=session.constraints,
        map_surface=session.store.map_surface,
    ).run()
    if is_profiling_enabled():
        print_profiling_summary()
