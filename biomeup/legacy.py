"""Detection of ESLint/Prettier packages in a manifest."""

from __future__ import annotations

import re
from typing import Any, Dict, List

from .manifest import iter_dependencies

LEGACY_TOOL_PATTERN = re.compile(r"(eslint|prettier)", re.IGNORECASE)


def find_legacy_packages(manifest: Dict[str, Any]) -> List[str]:
    """Return legacy lint/format package names in first-seen order, deduplicated."""
    found: Dict[str, None] = {}
    for _, name in iter_dependencies(manifest):
        if LEGACY_TOOL_PATTERN.search(name):
            found.setdefault(name, None)
    return list(found)


__all__ = ["LEGACY_TOOL_PATTERN", "find_legacy_packages"]
