#!/usr/bin/env python3
"""
Main CLI entry point for whiteboard
"""

import json
from typing import List, Optional

import typer
from rich.table import Table

from whiteboard import __version__
from whiteboard.config.settings import get_config_dir
from whiteboard.exceptions import CommandParseError, ConfigurationError
from whiteboard.grid.model import Grid, check_grid
from whiteboard.grid.session import GridSession
from whiteboard.utils.output import console

app = typer.Typer(
    name="whiteboard",
    help="Compose a resizable grid of panels and present files in it.",
    no_args_is_help=True,
)


def grid_to_dict(grid: Grid) -> dict:
    """Plain-data view of a grid for JSON output."""
    return {
        "rows": [
            {
                "id": row.id,
                "height": round(row.height, 4),
                "panels": [
                    {
                        "id": panel.id,
                        "width": round(panel.width, 4),
                        "content": getattr(panel.content, "name", None),
                    }
                    for panel in row.panels
                ],
            }
            for row in grid.rows
        ]
    }


def grid_table(grid: Grid) -> Table:
    """Render a grid as a Rich table, one line per row."""
    table = Table(title="Layout")
    table.add_column("Row", style="cyan", no_wrap=True)
    table.add_column("Height", justify="right", style="green")
    table.add_column("Panels (id: width)", style="magenta")

    for row_index, row in enumerate(grid.rows):
        panels = "  ".join(f"#{p.id}: {p.width:.2f}%" for p in row.panels)
        table.add_row(str(row_index), f"{row.height:.2f}%", panels)
    return table


@app.command()
def version():
    """Show whiteboard version"""
    typer.echo(f"whiteboard version {__version__}")


@app.command()
def show(
    command: Optional[List[str]] = typer.Option(
        None,
        "--command",
        "-c",
        help='Layout command to apply first, e.g. "add-panel 0 after" (repeatable)',
    ),
    format: str = typer.Option("table", "--format", "-f", help="Output format: table, json"),
):
    """Print the default layout, optionally after applying layout commands"""
    session = GridSession()
    try:
        session.apply_commands(command or [])
    except CommandParseError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from e

    grid = session.grid
    if format == "json":
        typer.echo(json.dumps(grid_to_dict(grid), indent=2))
    elif format == "table":
        console.print(grid_table(grid))
    else:
        console.print(f"[red]Error: unknown format '{format}'[/red]")
        raise typer.Exit(1)

    errors = check_grid(grid)
    for error in errors:
        console.print(f"[yellow]Warning: {error}[/yellow]")


@app.command("open")
def open_board(
    theme: Optional[str] = typer.Option(None, "--theme", "-t", help="Textual theme to use"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output"),
):
    """Open the interactive whiteboard"""
    from whiteboard.ui.app import WhiteboardApp
    from whiteboard.utils.logging_utils import setup_tui_logging

    try:
        logger = setup_tui_logging(verbose=verbose)
    except ConfigurationError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from e

    logger.info(f"Starting whiteboard {__version__} (config: {get_config_dir()})")
    try:
        WhiteboardApp(theme=theme).run()
    except KeyboardInterrupt:
        pass


def main():
    app()


if __name__ == "__main__":
    main()
