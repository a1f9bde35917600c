"""``swprecache manifest`` — print the precache manifest for a directory.

Scans the build root with the configured (or given) glob patterns, shows
the per-file size report and prints the serialized manifest.  Writes no
files.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from swprecache.cli.commands._shared import (
    BUILD_ERRORS,
    configure_logging,
    fail,
    load_settings,
)
from swprecache.core.builder import ManifestBuilder
from swprecache.models.config import ManifestConfig
from swprecache.report.renderer import ReportRenderer

console = Console(stderr=True)


def manifest_cmd(
    root: Optional[Path] = typer.Option(
        None,
        "--root",
        "-r",
        help="Build root to scan. Defaults to the configured dist directory.",
    ),
    patterns: Optional[List[str]] = typer.Option(
        None,
        "--pattern",
        "-p",
        help="Glob pattern relative to the root. Repeat for more; order matters.",
    ),
    max_size: Optional[int] = typer.Option(
        None,
        "--max-size",
        min=0,
        help="Largest file, in bytes, that may be precached.",
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-w",
        min=1,
        help="Threads used to hash files.",
    ),
    json_only: bool = typer.Option(
        False,
        "--json-only",
        help="Print only the serialized manifest.",
    ),
) -> None:
    """Print the precache manifest and size report for a build root."""
    settings = load_settings(
        max_cache_size_bytes=max_size,
        glob_patterns=patterns or None,
        workers=workers,
    )
    configure_logging("WARNING" if json_only else settings.log_level)

    config = ManifestConfig(
        root=root if root is not None else settings.dist_path,
        glob_patterns=tuple(settings.glob_patterns),
        max_cache_size_bytes=settings.max_cache_size_bytes,
        workers=settings.workers,
    )

    try:
        result = ManifestBuilder(config).build()
    except BUILD_ERRORS as exc:
        raise fail(console, "Manifest build failed", exc)

    if not json_only:
        ReportRenderer(console=console).print_result(result)

    # Plain stdout, no markup: the manifest is meant to be piped.
    typer.echo(result.serialized())
