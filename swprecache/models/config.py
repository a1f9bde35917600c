"""Manifest builder configuration model."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

# Guards against accidentally precaching a very large file.
DEFAULT_MAX_CACHE_SIZE_BYTES = 2 * 1024 * 1024

DEFAULT_GLOB_PATTERNS: tuple[str, ...] = (
    "css/**.css",
    "**.html",
    "images/**.*",
    "js/**.js",
)


class ManifestConfig(BaseModel):
    """Everything one manifest generation pass needs, passed in explicitly.

    Patterns are resolved relative to ``root`` and processed in order; when
    two patterns match the same path the later one wins.
    """

    model_config = ConfigDict(frozen=True)

    root: Path
    glob_patterns: tuple[str, ...] = DEFAULT_GLOB_PATTERNS
    max_cache_size_bytes: int = Field(default=DEFAULT_MAX_CACHE_SIZE_BYTES, ge=0)
    workers: int = Field(default=1, ge=1)
