"""Service worker template rendering.

Templates use the lodash interpolation syntax ``<%= name %>``.  The
manifest is bound to ``cacheOptions`` as a ready-to-embed JSON literal.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Mapping

from swprecache.models.manifest import BuildResult

logger = logging.getLogger(__name__)

CACHE_OPTIONS_VARIABLE = "cacheOptions"

_INTERPOLATE = re.compile(r"<%=\s*([A-Za-z_$][\w$]*)\s*%>")


class TemplateRenderError(RuntimeError):
    """Raised when a template references a name with no value."""


def render_template(template_text: str, context: Mapping[str, str]) -> str:
    """Substitute every ``<%= name %>`` in *template_text* from *context*."""
    missing = sorted(
        {m.group(1) for m in _INTERPOLATE.finditer(template_text)} - set(context)
    )
    if missing:
        raise TemplateRenderError(
            f"Template references undefined name(s): {', '.join(missing)}"
        )
    return _INTERPOLATE.sub(lambda m: str(context[m.group(1)]), template_text)


def write_service_worker(
    result: BuildResult, template_path: Path, output_path: Path
) -> Path:
    """Render *template_path* with the manifest and write *output_path*.

    The output is written as raw UTF-8 bytes so line endings are never
    translated; identical manifests give identical files.
    """
    template_path = Path(template_path)
    output_path = Path(output_path)
    try:
        template_text = template_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TemplateRenderError(
            f"Cannot read template {template_path}: {exc.strerror or exc}"
        ) from exc

    rendered = render_template(
        template_text, {CACHE_OPTIONS_VARIABLE: result.serialized()}
    )
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(rendered.encode("utf-8"))
    logger.info(
        "Wrote %s with %d precached entries", output_path, len(result.manifest)
    )
    return output_path
