"""Manifest builder — scan, filter by size, dedupe, sort.

One pass over an ordered list of glob patterns produces a ``BuildResult``:
the canonical ``Manifest`` and a ``SizeReport`` recording every accept/skip
decision.  The pass is a pure function of the matched files' names and bytes
and the pattern list.

Duplicate paths across patterns resolve to the value from the pattern
processed last.  A differing hash for the same path is logged as a warning.
"""

from __future__ import annotations

import logging
from pathlib import Path

from swprecache.core.scanner import scan_pattern, validate_pattern
from swprecache.models.config import DEFAULT_MAX_CACHE_SIZE_BYTES, ManifestConfig
from swprecache.models.manifest import (
    BuildResult,
    FileRecord,
    Manifest,
    SizeDecision,
    SizeReport,
)

logger = logging.getLogger(__name__)


class ManifestBuilder:
    """Builds a precache manifest from a ``ManifestConfig``.

    Parameters
    ----------
    config:
        Build root, ordered glob patterns, per-file size budget and the
        number of hashing threads.
    """

    def __init__(self, config: ManifestConfig) -> None:
        self.config = config

    def build(self) -> BuildResult:
        """Run one full generation pass.

        Raises
        ------
        PatternResolutionError
            If any pattern is invalid.  All patterns are checked before any
            file is hashed.
        FileReadError
            If any matched file cannot be read.  No manifest is produced.
        """
        for pattern in self.config.glob_patterns:
            validate_pattern(pattern)

        budget = self.config.max_cache_size_bytes
        path_to_hash: dict[str, str] = {}
        decisions: list[SizeDecision] = []
        total = 0

        for pattern in self.config.glob_patterns:
            records = scan_pattern(
                pattern, self.config.root, workers=self.config.workers
            )
            for record in records:
                accepted = self._accept(record, budget)
                decisions.append(
                    SizeDecision(
                        relative_path=record.relative_path,
                        size_bytes=record.size_bytes,
                        accepted=accepted,
                        pattern=pattern,
                    )
                )
                if not accepted:
                    logger.info(
                        "  Skipped %s - %d bytes", record.relative_path, record.size_bytes
                    )
                    continue

                previous = path_to_hash.get(record.relative_path)
                if previous is not None and previous != record.content_hash:
                    logger.warning(
                        "Path %s matched again by %r with a different hash; "
                        "keeping the later one.",
                        record.relative_path,
                        pattern,
                    )
                path_to_hash[record.relative_path] = record.content_hash
                total += record.size_bytes
                logger.info(
                    "  Added %s - %d bytes", record.relative_path, record.size_bytes
                )

        report = SizeReport(
            budget_bytes=budget,
            decisions=tuple(decisions),
            total_accepted_bytes=total,
        )
        logger.info("Total precache size: %d KB", report.total_kb)

        return BuildResult(manifest=Manifest.from_mapping(path_to_hash), report=report)

    @staticmethod
    def _accept(record: FileRecord, budget: int) -> bool:
        return record.size_bytes <= budget


def build_manifest(
    patterns: list[str] | tuple[str, ...],
    root: Path | str,
    budget: int = DEFAULT_MAX_CACHE_SIZE_BYTES,
) -> tuple[Manifest, int]:
    """Functional form: return ``(manifest, total_accepted_bytes)``."""
    config = ManifestConfig(
        root=Path(root), glob_patterns=tuple(patterns), max_cache_size_bytes=budget
    )
    result = ManifestBuilder(config).build()
    return result.manifest, result.total_accepted_bytes
