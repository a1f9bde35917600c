"""Precache manifest models — all frozen, all ordered.

The manifest is an ordered sequence of ``(relative_path, content_hash)``
pairs sorted by path.  It is never serialized as a mapping: the output must
be byte-identical for identical inputs, and the generated service worker
relies on a byte diff to decide whether clients re-fetch.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, model_validator

from swprecache.core.hasher import canonical_json_text


class FileRecord(BaseModel):
    """A matched file: where it lives under the build root, its size and digest."""

    model_config = ConfigDict(frozen=True)

    relative_path: str  # POSIX form, relative to the build root
    size_bytes: int = Field(ge=0)
    content_hash: str  # hex digest

    def to_entry(self) -> ManifestEntry:
        """Drop the size, keeping only what goes into the manifest."""
        return ManifestEntry(
            relative_path=self.relative_path, content_hash=self.content_hash
        )


class ManifestEntry(BaseModel):
    """One ``[path, hash]`` pair of the serialized manifest."""

    model_config = ConfigDict(frozen=True)

    relative_path: str
    content_hash: str

    def as_pair(self) -> list[str]:
        return [self.relative_path, self.content_hash]


class Manifest(BaseModel):
    """Sorted, duplicate-free sequence of manifest entries.

    Construction fails if entries are not strictly ascending by path, so an
    instance is always in its canonical order.
    """

    model_config = ConfigDict(frozen=True)

    entries: tuple[ManifestEntry, ...] = ()

    @model_validator(mode="after")
    def _check_canonical_order(self) -> Manifest:
        paths = [e.relative_path for e in self.entries]
        for previous, current in zip(paths, paths[1:]):
            if previous == current:
                raise ValueError(f"Duplicate manifest path: {current!r}")
            if previous > current:
                raise ValueError(
                    f"Manifest entries out of order: {previous!r} before {current!r}"
                )
        return self

    @classmethod
    def from_mapping(cls, path_to_hash: dict[str, str]) -> Manifest:
        """Build a manifest from a path -> hash mapping, sorting by path.

        The mapping's own iteration order never reaches the output.
        """
        return cls(
            entries=tuple(
                ManifestEntry(relative_path=path, content_hash=path_to_hash[path])
                for path in sorted(path_to_hash)
            )
        )

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def paths(self) -> list[str]:
        return [e.relative_path for e in self.entries]

    def to_pairs(self) -> list[list[str]]:
        """The array-of-pairs shape: ``[[path, hash], ...]``."""
        return [e.as_pair() for e in self.entries]

    def to_json(self) -> str:
        """Compact JSON array of pairs, ready to embed in a script."""
        return canonical_json_text(self.to_pairs())


class SizeDecision(BaseModel):
    """Whether one matched file made it under the size budget."""

    model_config = ConfigDict(frozen=True)

    relative_path: str
    size_bytes: int
    accepted: bool
    pattern: str = ""

    def log_line(self) -> str:
        verb = "Added" if self.accepted else "Skipped"
        return f"  {verb} {self.relative_path} - {self.size_bytes} bytes"


class SizeReport(BaseModel):
    """Per-file accept/skip log plus the cumulative accepted size."""

    model_config = ConfigDict(frozen=True)

    budget_bytes: int
    decisions: tuple[SizeDecision, ...] = ()
    total_accepted_bytes: int = 0

    @property
    def accepted(self) -> list[SizeDecision]:
        return [d for d in self.decisions if d.accepted]

    @property
    def skipped(self) -> list[SizeDecision]:
        return [d for d in self.decisions if not d.accepted]

    @property
    def total_kb(self) -> int:
        """Accepted total in KiB, rounded half up."""
        return int(math.floor(self.total_accepted_bytes / 1024 + 0.5))

    def log_lines(self) -> list[str]:
        lines = [d.log_line() for d in self.decisions]
        lines.append(f"Total precache size: {self.total_kb} KB")
        return lines


class BuildResult(BaseModel):
    """Everything one generation pass produces."""

    model_config = ConfigDict(frozen=True)

    manifest: Manifest
    report: SizeReport

    @property
    def total_accepted_bytes(self) -> int:
        return self.report.total_accepted_bytes

    def serialized(self) -> str:
        return self.manifest.to_json()
