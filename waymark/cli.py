#!/usr/bin/env python3
"""
Waymark - bookmark browser
Main CLI entry point
"""

from __future__ import annotations

import typer

from waymark.commands import browse_cmd, config_cmd

app = typer.Typer(
    name="waymark",
    help="Browse bookmark collections with distance hints and map focus",
    no_args_is_help=True,
    add_completion=True,
)

# Full-screen Textual browser
app.command(name="browse", help="Launch the full-screen bookmark browser")(browse_cmd.browse)
app.command(name="list", help="Print one browse screen to the terminal")(browse_cmd.list_screen)

app.add_typer(config_cmd.app, name="config", help="Manage configuration settings")


@app.callback()
def callback() -> None:
    """
    Waymark - bookmark browser

    Commands:
      browse LIBRARY   - Full-screen browser (collections, then bookmarks)
      list LIBRARY     - Print the collections screen, or one collection with --collection

    Utilities:
      config           - Show or export configuration
    """
    pass


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
