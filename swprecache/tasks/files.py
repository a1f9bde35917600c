"""File tree tasks: mirror directories, copy helper scripts, clean outputs."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)


def copy_tree(src: Path, dest: Path) -> int:
    """Mirror every file under *src* into *dest*, returning the file count.

    Existing files in *dest* are overwritten; files only in *dest* are kept.
    """
    src = Path(src)
    dest = Path(dest)
    if not src.is_dir():
        raise FileNotFoundError(f"Source directory not found: {src}")

    shutil.copytree(src, dest, dirs_exist_ok=True)
    count = sum(1 for p in src.rglob("*") if p.is_file())
    logger.info("Copied %d file(s) from %s to %s", count, src, dest)
    return count


def copy_helper_scripts(helpers_dir: Path, dest: Path) -> list[Path]:
    """Copy the ``*.js`` files directly under *helpers_dir* into *dest*."""
    helpers_dir = Path(helpers_dir)
    dest = Path(dest)
    if not helpers_dir.is_dir():
        raise FileNotFoundError(f"Helper directory not found: {helpers_dir}")
    dest.mkdir(parents=True, exist_ok=True)

    copied: list[Path] = []
    for script in sorted(helpers_dir.glob("*.js")):
        if not script.is_file():
            continue
        target = dest / script.name
        shutil.copy2(script, target)
        copied.append(target)

    logger.info("Copied %d helper script(s) into %s", len(copied), dest)
    return copied


def clean(paths: Iterable[Path]) -> list[Path]:
    """Delete each existing directory (or file) in *paths*; return what was removed."""
    removed: list[Path] = []
    for path in paths:
        path = Path(path)
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        elif path.exists() or path.is_symlink():
            path.unlink()
        else:
            continue
        removed.append(path)
        logger.info("Removed %s", path)
    return removed
