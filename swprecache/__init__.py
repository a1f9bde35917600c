"""swprecache: deterministic precache manifests for service workers.

Scans a built output directory with an ordered list of glob patterns,
hashes every matched file, drops files over the size budget and emits a
path-sorted array of ``[path, hash]`` pairs.  Identical trees always give
byte-identical output, so the generated service worker changes exactly when
a cached asset does.
"""

__version__ = "0.1.0"

from swprecache.core.builder import ManifestBuilder, build_manifest
from swprecache.core.scanner import (
    FileReadError,
    PatternResolutionError,
    scan_pattern,
)
from swprecache.models.config import ManifestConfig
from swprecache.models.manifest import BuildResult, Manifest

__all__ = [
    "BuildResult",
    "FileReadError",
    "Manifest",
    "ManifestBuilder",
    "ManifestConfig",
    "PatternResolutionError",
    "build_manifest",
    "scan_pattern",
    "__version__",
]
