"""Build tasks around the manifest builder: copy, render, clean."""

from swprecache.tasks.files import clean, copy_helper_scripts, copy_tree
from swprecache.tasks.pipeline import generate_service_worker, run_build
from swprecache.tasks.template import (
    TemplateRenderError,
    render_template,
    write_service_worker,
)

__all__ = [
    "TemplateRenderError",
    "clean",
    "copy_helper_scripts",
    "copy_tree",
    "generate_service_worker",
    "render_template",
    "run_build",
    "write_service_worker",
]
