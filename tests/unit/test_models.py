"""Tests for manifest models — ordering, immutability, report formatting."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from swprecache.models.config import (
    DEFAULT_GLOB_PATTERNS,
    DEFAULT_MAX_CACHE_SIZE_BYTES,
    ManifestConfig,
)
from swprecache.models.manifest import (
    FileRecord,
    Manifest,
    ManifestEntry,
    SizeDecision,
    SizeReport,
)


class TestFileRecord:
    def test_frozen(self):
        record = FileRecord(relative_path="a.js", size_bytes=1, content_hash="h")
        with pytest.raises(ValidationError):
            record.size_bytes = 2

    def test_negative_size_rejected(self):
        with pytest.raises(ValidationError):
            FileRecord(relative_path="a.js", size_bytes=-1, content_hash="h")

    def test_to_entry_drops_size(self):
        record = FileRecord(relative_path="a.js", size_bytes=5, content_hash="h")
        assert record.to_entry() == ManifestEntry(relative_path="a.js", content_hash="h")


class TestManifest:
    def test_from_mapping_sorts_by_path(self):
        manifest = Manifest.from_mapping({"js/c.js": "2", "css/a.css": "1", "b.html": "3"})
        assert manifest.paths == ["b.html", "css/a.css", "js/c.js"]

    def test_from_mapping_ignores_insertion_order(self):
        forward = Manifest.from_mapping({"a": "1", "b": "2"})
        backward = Manifest.from_mapping({"b": "2", "a": "1"})
        assert forward.to_json() == backward.to_json()

    def test_unsorted_entries_rejected(self):
        with pytest.raises(ValidationError, match="out of order"):
            Manifest(
                entries=(
                    ManifestEntry(relative_path="b", content_hash="1"),
                    ManifestEntry(relative_path="a", content_hash="2"),
                )
            )

    def test_duplicate_entries_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate"):
            Manifest(
                entries=(
                    ManifestEntry(relative_path="a", content_hash="1"),
                    ManifestEntry(relative_path="a", content_hash="1"),
                )
            )

    def test_serializes_as_array_of_pairs(self):
        manifest = Manifest.from_mapping({"js/c.js": "H2", "css/a.css": "H1"})
        assert manifest.to_pairs() == [["css/a.css", "H1"], ["js/c.js", "H2"]]
        assert manifest.to_json() == '[["css/a.css","H1"],["js/c.js","H2"]]'

    def test_empty(self):
        manifest = Manifest()
        assert len(manifest) == 0
        assert manifest.to_json() == "[]"

    def test_uppercase_sorts_before_lowercase(self):
        manifest = Manifest.from_mapping({"a.js": "1", "B.js": "2", "_.js": "3"})
        assert manifest.paths == ["B.js", "_.js", "a.js"]


class TestSizeReport:
    def _report(self, total: int) -> SizeReport:
        return SizeReport(
            budget_bytes=100,
            decisions=(
                SizeDecision(relative_path="a.css", size_bytes=10, accepted=True),
                SizeDecision(relative_path="b.png", size_bytes=500, accepted=False),
            ),
            total_accepted_bytes=total,
        )

    def test_accepted_and_skipped_views(self):
        report = self._report(10)
        assert [d.relative_path for d in report.accepted] == ["a.css"]
        assert [d.relative_path for d in report.skipped] == ["b.png"]

    def test_log_lines(self):
        assert self._report(10).log_lines() == [
            "  Added a.css - 10 bytes",
            "  Skipped b.png - 500 bytes",
            "Total precache size: 0 KB",
        ]

    @pytest.mark.parametrize(
        "total,expected_kb",
        [(0, 0), (511, 0), (512, 1), (1024, 1), (1535, 1), (1536, 2), (2048, 2)],
    )
    def test_total_kb_rounds_half_up(self, total, expected_kb):
        assert self._report(total).total_kb == expected_kb


class TestManifestConfig:
    def test_defaults(self):
        config = ManifestConfig(root=Path("dist"))
        assert config.max_cache_size_bytes == DEFAULT_MAX_CACHE_SIZE_BYTES == 2_097_152
        assert config.glob_patterns == DEFAULT_GLOB_PATTERNS
        assert config.workers == 1

    def test_zero_workers_rejected(self):
        with pytest.raises(ValidationError):
            ManifestConfig(root=Path("dist"), workers=0)

    def test_frozen(self):
        config = ManifestConfig(root=Path("dist"))
        with pytest.raises(ValidationError):
            config.max_cache_size_bytes = 1
