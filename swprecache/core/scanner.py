"""Glob pattern resolution and per-file hashing.

Patterns are resolved relative to a build root.  ``**`` as a whole path
component recurses into subdirectories; ``**`` inside a component behaves
like ``*``.  Dotfiles are not matched by wildcards.

Matches are always returned sorted by relative path so nothing downstream
depends on the order the filesystem happens to enumerate entries in.
"""

from __future__ import annotations

import glob
import logging
import os
import stat
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path, PurePath, PurePosixPath, PureWindowsPath

from swprecache.core.hasher import md5_hex
from swprecache.models.manifest import FileRecord

logger = logging.getLogger(__name__)


class PatternResolutionError(ValueError):
    """Raised when a glob pattern cannot be resolved against the build root."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid glob pattern {pattern!r}: {reason}")


class FileReadError(RuntimeError):
    """Raised when a matched file cannot be read.

    This is fatal for the whole build: a partial manifest would silently
    under-cache assets.
    """

    def __init__(self, path: Path, pattern: str, cause: OSError) -> None:
        self.path = path
        self.pattern = pattern
        super().__init__(
            f"Cannot read {path} (matched by {pattern!r}): {cause.strerror or cause}"
        )


def validate_pattern(pattern: str) -> None:
    """Raise ``PatternResolutionError`` if *pattern* is not usable.

    A usable pattern is non-blank, relative, free of NUL bytes, never walks
    above the root with ``..``, and has every ``[`` character class closed.
    """
    if not pattern or not pattern.strip():
        raise PatternResolutionError(pattern, "pattern is empty")
    if "\x00" in pattern:
        raise PatternResolutionError(pattern, "pattern contains a NUL byte")
    if PurePosixPath(pattern).is_absolute() or PureWindowsPath(pattern).is_absolute():
        raise PatternResolutionError(pattern, "pattern must be relative to the root")
    if PureWindowsPath(pattern).drive:
        raise PatternResolutionError(pattern, "pattern must not name a drive")
    if ".." in pattern.replace("\\", "/").split("/"):
        raise PatternResolutionError(pattern, "pattern must not leave the root")

    # Unterminated character class: "[" with no "]" after it in the same
    # component.  A "]" directly after "[" (or "[!") is a literal member.
    for component in pattern.replace("\\", "/").split("/"):
        i = 0
        while i < len(component):
            if component[i] == "[":
                j = i + 1
                if j < len(component) and component[j] == "!":
                    j += 1
                if j < len(component) and component[j] == "]":
                    j += 1
                close = component.find("]", j)
                if close == -1:
                    raise PatternResolutionError(
                        pattern, "unterminated character class '['"
                    )
                i = close + 1
            else:
                i += 1


def relative_posix_path(path: Path | str, root: Path | str) -> str:
    """Strip *root* from *path* and return it with forward slashes."""
    return PurePath(os.path.relpath(path, root)).as_posix()


def resolve_pattern(pattern: str, root: Path) -> list[Path]:
    """Return the regular files under *root* matching *pattern*, sorted.

    Directories and symlinks to directories are dropped; symlinks to files
    are followed.  A match that cannot be stat'ed (dangling symlink, removed
    after listing, no permission) raises ``FileReadError``.
    """
    validate_pattern(pattern)
    root = Path(root)
    full_pattern = os.path.join(glob.escape(str(root)), pattern)
    matches: list[Path] = []
    for match in glob.glob(full_pattern, recursive=True):
        try:
            st = os.stat(match)
        except OSError as exc:
            raise FileReadError(Path(match), pattern, exc) from exc
        if stat.S_ISREG(st.st_mode):
            matches.append(Path(match))
    return sorted(matches, key=lambda p: relative_posix_path(p, root))


def read_record(path: Path, root: Path, pattern: str = "") -> FileRecord:
    """Read *path* fully and return its ``FileRecord``."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise FileReadError(Path(path), pattern, exc) from exc
    return FileRecord(
        relative_path=relative_posix_path(path, root),
        size_bytes=len(data),
        content_hash=md5_hex(data),
    )


def scan_pattern(pattern: str, root: Path, *, workers: int = 1) -> list[FileRecord]:
    """Resolve *pattern* under *root* and hash every matched file.

    With ``workers > 1`` files are hashed on a thread pool; the returned
    list is still in sorted path order.  Zero matches is an empty list, not
    an error.
    """
    paths = resolve_pattern(pattern, root)
    logger.debug("Pattern %r matched %d file(s)", pattern, len(paths))

    if workers <= 1 or len(paths) <= 1:
        return [read_record(p, root, pattern) for p in paths]

    with ThreadPoolExecutor(
        max_workers=min(workers, len(paths)), thread_name_prefix="swprecache-hash"
    ) as pool:
        return list(pool.map(lambda p: read_record(p, root, pattern), paths))
