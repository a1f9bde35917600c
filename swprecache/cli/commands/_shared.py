"""Helpers shared by the CLI subcommands: settings, logging, error exits."""

from __future__ import annotations

import logging
from typing import Any

import typer
from rich.console import Console
from rich.logging import RichHandler

from swprecache.config import PrecacheSettings
from swprecache.core.scanner import FileReadError, PatternResolutionError
from swprecache.report.renderer import ReportRenderer
from swprecache.tasks.template import TemplateRenderError

# Failures a build can end with; anything else is a bug and propagates.
BUILD_ERRORS = (
    PatternResolutionError,
    FileReadError,
    TemplateRenderError,
    OSError,
)


def load_settings(**overrides: Any) -> PrecacheSettings:
    """Settings from env/.env with the CLI options that were given on top."""
    return PrecacheSettings(**{k: v for k, v in overrides.items() if v is not None})


def configure_logging(level: str) -> None:
    """Route ``swprecache`` log records to stderr through Rich."""
    logger = logging.getLogger("swprecache")
    logger.setLevel(level.upper())
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(
            RichHandler(
                console=Console(stderr=True),
                show_time=False,
                show_path=False,
            )
        )


def fail(console: Console, title: str, exc: BaseException) -> typer.Exit:
    """Print *exc* in red and return the exit to raise."""
    ReportRenderer(console=console).print_error(title, exc)
    return typer.Exit(code=1)
