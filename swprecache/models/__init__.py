"""swprecache data models — all Pydantic v2, all frozen (immutable)."""

from swprecache.models.config import (
    DEFAULT_GLOB_PATTERNS,
    DEFAULT_MAX_CACHE_SIZE_BYTES,
    ManifestConfig,
)
from swprecache.models.manifest import (
    BuildResult,
    FileRecord,
    Manifest,
    ManifestEntry,
    SizeDecision,
    SizeReport,
)

__all__ = [
    # config
    "DEFAULT_GLOB_PATTERNS",
    "DEFAULT_MAX_CACHE_SIZE_BYTES",
    "ManifestConfig",
    # manifest
    "FileRecord",
    "ManifestEntry",
    "Manifest",
    "SizeDecision",
    "SizeReport",
    "BuildResult",
]
