"""Shared test fixtures for swprecache."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from swprecache.config import PrecacheSettings
from swprecache.models.config import ManifestConfig

E2E_PATTERNS = ("css/**.css", "images/**.*", "js/**.js")
E2E_BUDGET = 2 * 1024 * 1024


@pytest.fixture
def make_tree() -> Callable[[Path, dict[str, bytes]], Path]:
    """Factory fixture: write ``{relative_path: bytes}`` under a root."""

    def _factory(root: Path, files: dict[str, bytes]) -> Path:
        for rel, data in files.items():
            target = root / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)
        return root

    return _factory


@pytest.fixture
def dist_root(tmp_path: Path) -> Path:
    """An empty build root."""
    root = tmp_path / "dist"
    root.mkdir()
    return root


@pytest.fixture
def e2e_tree(dist_root: Path, make_tree) -> Path:
    """css/a.css (10 B), images/b.png (3,000,000 B), js/c.js (20 B)."""
    return make_tree(
        dist_root,
        {
            "css/a.css": b"a" * 10,
            "images/b.png": b"\x89" * 3_000_000,
            "js/c.js": b"c" * 20,
        },
    )


@pytest.fixture
def e2e_config(e2e_tree: Path) -> ManifestConfig:
    return ManifestConfig(
        root=e2e_tree, glob_patterns=E2E_PATTERNS, max_cache_size_bytes=E2E_BUDGET
    )


@pytest.fixture
def project(tmp_path: Path, make_tree) -> Path:
    """A project with an app/ dev tree and the service worker helpers."""
    root = tmp_path / "project"
    make_tree(
        root,
        {
            "app/index.html": b"<html></html>",
            "app/css/site.css": b"body{}",
            "app/js/app.js": b"console.log(1);",
            "app/images/logo.png": b"PNG",
            "service-worker-helpers/service-worker.tmpl": (
                b"var CACHE_OPTIONS = <%= cacheOptions %>;\n"
            ),
            "service-worker-helpers/sw-toolbox.js": b"// toolbox",
        },
    )
    return root


@pytest.fixture
def settings(project: Path) -> PrecacheSettings:
    return PrecacheSettings(project_root=project)
