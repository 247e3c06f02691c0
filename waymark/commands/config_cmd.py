"""Config command for Waymark CLI."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from waymark.core.config import load_config

app = typer.Typer(no_args_is_help=True)
console = Console()


@app.command("show")
def show(config_file: Optional[Path] = typer.Option(None, "--config", help="Config YAML file")):
    """Show the effective configuration."""
    try:
        cfg = load_config(config_file)
    except ValueError as e:
        console.print(f"[bold red]❌ Invalid configuration:[/] {e}")
        raise typer.Exit(1)

    summary = cfg.get_config_summary()
    table = Table(title="Current Configuration", show_header=False)
    table.add_column("Setting", style="bold")
    table.add_column("Value", style="cyan")
    for key, value in summary.items():
        table.add_row(key, "[dim]-[/]" if value is None else str(value))
    console.print(table)


@app.command("export")
def export(
    output_path: Path = typer.Argument(Path("waymark_config.yaml"), help="Where to write the template"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
):
    """Export a configuration template."""
    if output_path.exists() and not force:
        console.print(f"[bold red]❌ Error:[/] {output_path} already exists (use --force to overwrite)")
        raise typer.Exit(1)
    cfg = load_config()
    cfg.export_template(output_path)
    console.print(f"[bold green]✔[/] Configuration template exported to [underline]{output_path}[/]")
