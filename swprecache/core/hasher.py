"""Content hashing and canonical serialization helpers.

Digests here are change-detection fingerprints, not security primitives:
MD5 is stable across runs and platforms, and 128 bits is plenty to notice
that a file changed.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any


def md5_hex(data: bytes) -> str:
    """Return the MD5 hex digest of raw bytes."""
    return hashlib.md5(data, usedforsecurity=False).hexdigest()


def canonical_json_text(obj: Any) -> str:
    """Produce canonical JSON text — compact and ASCII-only.

    - no whitespace separators (",", ":")
    - ensure_ascii=True so the text is identical on every platform encoding
    """
    return json.dumps(obj, separators=(",", ":"), ensure_ascii=True)
