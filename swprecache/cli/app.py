"""Main Typer application — imports and registers all CLI commands.

Entry point: ``swprecache`` (configured via pyproject.toml project.scripts).
"""

from __future__ import annotations

import typer

from swprecache.cli.commands.build import build_cmd
from swprecache.cli.commands.clean import clean_cmd
from swprecache.cli.commands.generate import generate_cmd
from swprecache.cli.commands.manifest_cmd import manifest_cmd

app = typer.Typer(
    name="swprecache",
    help="swprecache: deterministic service worker precache manifests.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

# Register subcommands
app.command(name="manifest", help="Print the precache manifest for a build root.")(manifest_cmd)
app.command(name="generate", help="Write the service worker into the dist directory.")(generate_cmd)
app.command(name="build", help="Copy helpers, mirror dev to dist, generate.")(build_cmd)
app.command(name="clean", help="Remove build outputs.")(clean_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
