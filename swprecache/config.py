"""Project configuration — env-driven.

Centralized config using pydantic-settings.  Reads from a .env file and
SWPRECACHE_* environment variables.  The manifest builder itself never reads
this: ``PrecacheSettings.manifest_config()`` turns it into the explicit
``ManifestConfig`` the builder is given.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from swprecache.models.config import (
    DEFAULT_GLOB_PATTERNS,
    DEFAULT_MAX_CACHE_SIZE_BYTES,
    ManifestConfig,
)


class PrecacheSettings(BaseSettings):
    """Project layout and precache policy with environment variable overrides.

    Examples
    --------
    Override via environment::

        export SWPRECACHE_DIST_DIR=build
        export SWPRECACHE_MAX_CACHE_SIZE_BYTES=1048576
        export SWPRECACHE_GLOB_PATTERNS='["**.html", "js/**.js"]'

    Or via .env file::

        SWPRECACHE_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SWPRECACHE_",
        env_file_encoding="utf-8",
    )

    log_level: str = "INFO"

    # Project layout, relative to project_root
    project_root: Path = Path(".")
    dev_dir: Path = Path("app")
    dist_dir: Path = Path("dist")
    helpers_dir: Path = Path("service-worker-helpers")
    template_name: str = "service-worker.tmpl"
    output_name: str = "service-worker.js"

    # Precache policy
    max_cache_size_bytes: int = Field(default=DEFAULT_MAX_CACHE_SIZE_BYTES, ge=0)
    glob_patterns: list[str] = Field(
        default_factory=lambda: list(DEFAULT_GLOB_PATTERNS)
    )
    workers: int = Field(default=1, ge=1)

    @property
    def dev_path(self) -> Path:
        return self.project_root / self.dev_dir

    @property
    def dist_path(self) -> Path:
        return self.project_root / self.dist_dir

    @property
    def helpers_path(self) -> Path:
        """Source directory of the service worker template and helper scripts."""
        return self.project_root / self.helpers_dir

    @property
    def helpers_dev_path(self) -> Path:
        """Where helper scripts are copied inside the dev directory."""
        return self.dev_path / self.helpers_dir.name

    @property
    def template_path(self) -> Path:
        return self.helpers_path / self.template_name

    @property
    def output_path(self) -> Path:
        return self.dist_path / self.output_name

    def manifest_config(self) -> ManifestConfig:
        """The builder configuration for scanning the dist directory."""
        return ManifestConfig(
            root=self.dist_path,
            glob_patterns=tuple(self.glob_patterns),
            max_cache_size_bytes=self.max_cache_size_bytes,
            workers=self.workers,
        )
