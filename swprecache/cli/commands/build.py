"""``swprecache build`` — copy helpers, mirror dev to dist, generate.

Runs the three build steps in order and stops at the first failure.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel

from swprecache.cli.commands._shared import (
    BUILD_ERRORS,
    configure_logging,
    fail,
    load_settings,
)
from swprecache.tasks.pipeline import run_build

console = Console()


def build_cmd(
    project_root: Optional[Path] = typer.Option(
        None,
        "--project-root",
        "-C",
        help="Project directory containing the dev, dist and helper directories.",
    ),
) -> None:
    """Copy helper scripts, copy the dev tree to dist, generate the service worker."""
    settings = load_settings(project_root=project_root)
    configure_logging(settings.log_level)

    try:
        result = run_build(settings)
    except BUILD_ERRORS as exc:
        raise fail(console, "Build failed", exc)

    console.print(
        Panel(
            "\n".join([
                "[bold green]Build complete![/bold green]",
                "",
                f"[bold]Dist:[/bold]            {settings.dist_path}",
                f"[bold]Service worker:[/bold]  {settings.output_path}",
                f"[bold]Entries:[/bold]         {len(result.manifest)}",
                f"[bold]Skipped:[/bold]         {len(result.report.skipped)}",
                f"[bold]Precache size:[/bold]   {result.report.total_kb} KB",
            ]),
            title="[bold]swprecache[/bold]",
            border_style="green",
            padding=(1, 2),
        )
    )
