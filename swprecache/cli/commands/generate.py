"""``swprecache generate`` — render the service worker into the dist directory."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from swprecache.cli.commands._shared import (
    BUILD_ERRORS,
    configure_logging,
    fail,
    load_settings,
)
from swprecache.report.renderer import ReportRenderer
from swprecache.tasks.pipeline import generate_service_worker

console = Console()


def generate_cmd(
    project_root: Optional[Path] = typer.Option(
        None,
        "--project-root",
        "-C",
        help="Project directory containing dist and the helper directory.",
    ),
    max_size: Optional[int] = typer.Option(
        None,
        "--max-size",
        min=0,
        help="Largest file, in bytes, that may be precached.",
    ),
) -> None:
    """Scan the dist directory and write the rendered service worker.

    The manifest is built first; if any pattern or file fails, no service
    worker is written.
    """
    settings = load_settings(project_root=project_root, max_cache_size_bytes=max_size)
    configure_logging(settings.log_level)

    try:
        result = generate_service_worker(settings)
    except BUILD_ERRORS as exc:
        raise fail(console, "Service worker generation failed", exc)

    ReportRenderer(console=console).print_result(result)
    console.print(f"[bold green]Wrote[/bold green] {settings.output_path}")
