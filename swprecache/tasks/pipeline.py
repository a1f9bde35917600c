"""The build sequence: helpers -> dev, dev -> dist, generate the service worker."""

from __future__ import annotations

import logging
from pathlib import Path

from swprecache.config import PrecacheSettings
from swprecache.core.builder import ManifestBuilder
from swprecache.models.manifest import BuildResult
from swprecache.tasks.files import copy_helper_scripts, copy_tree
from swprecache.tasks.template import write_service_worker

logger = logging.getLogger(__name__)


def generate_service_worker(settings: PrecacheSettings) -> BuildResult:
    """Scan the dist directory and write the rendered service worker.

    Nothing is written unless the manifest build succeeds.
    """
    result = ManifestBuilder(settings.manifest_config()).build()
    write_service_worker(result, settings.template_path, settings.output_path)
    return result


def run_build(settings: PrecacheSettings) -> BuildResult:
    """Run the full build and return the manifest that was rendered."""
    helpers_dev: Path = settings.helpers_dev_path
    copy_helper_scripts(settings.helpers_path, helpers_dev)
    copy_tree(settings.dev_path, settings.dist_path)
    logger.info("Generating %s", settings.output_path)
    return generate_service_worker(settings)
