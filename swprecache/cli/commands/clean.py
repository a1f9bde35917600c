"""``swprecache clean`` — remove the dist directory and copied helper scripts."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from swprecache.cli.commands._shared import configure_logging, load_settings
from swprecache.tasks.files import clean

console = Console()


def clean_cmd(
    project_root: Optional[Path] = typer.Option(
        None,
        "--project-root",
        "-C",
        help="Project directory containing the dev and dist directories.",
    ),
) -> None:
    """Delete build outputs."""
    settings = load_settings(project_root=project_root)
    configure_logging(settings.log_level)

    removed = clean([settings.dist_path, settings.helpers_dev_path])
    if not removed:
        console.print("[dim]Nothing to clean.[/dim]")
        return
    for path in removed:
        console.print(f"[bold]Removed[/bold] {path}")
