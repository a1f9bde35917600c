"""swprecache CLI — Typer-based command-line interface.

Provides the ``swprecache`` command with subcommands for printing a
precache manifest, generating the service worker, running the full build
and cleaning build outputs.

All output uses Rich for formatted terminal display.
"""
