"""Environment probing: upward file search, package manager and archetype detection."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from .logging import get_logger
from .manifest import MANIFEST_FILENAME, has_dependency
from .models import FoundFile, PackageManagerProfile, ProjectArchetype
from .package_managers import (
    DEFAULT_PACKAGE_MANAGER,
    LOCKFILE_PRIORITY,
    PACKAGE_MANAGERS,
    parse_package_manager_field,
)

_REACT_PACKAGES: tuple[str, ...] = ("next", "react", "react-dom")

_LOGGER = get_logger("probe")


def find_config_file(start: Path, candidates: Sequence[str]) -> Optional[FoundFile]:
    """Search ``start`` and its ancestors for the first existing candidate.

    Every candidate is checked in a directory before moving to its parent, so
    the closest directory wins and candidate order only breaks ties within a
    level. The search stops at the filesystem root.
    """
    current = Path(start).resolve()
    while True:
        for name in candidates:
            candidate = current / name
            if candidate.exists():
                return FoundFile(directory=current, file=candidate, name=name)
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _declared_package_manager(path: Path) -> Optional[PackageManagerProfile]:
    # Unreadable manifests are skipped so probing can continue to lockfiles.
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        _LOGGER.debug("Ignoring unreadable manifest %s: %s", path, exc)
        return None
    if not isinstance(data, dict):
        return None
    return parse_package_manager_field(data.get("packageManager"))


def detect_package_manager(root: Path) -> PackageManagerProfile:
    """Pick the package manager for ``root``.

    Priority: ``packageManager`` in the local manifest, then in the nearest
    ancestor manifest, then the first lockfile found upward in pnpm/yarn/bun
    order, then npm.
    """
    root = Path(root).resolve()

    local = root / MANIFEST_FILENAME
    if local.exists():
        profile = _declared_package_manager(local)
        if profile is not None:
            _LOGGER.debug("packageManager field in %s selects %s", local, profile.id)
            return profile

    if root.parent != root:
        ancestor = find_config_file(root.parent, [MANIFEST_FILENAME])
        if ancestor is not None:
            profile = _declared_package_manager(ancestor.file)
            if profile is not None:
                _LOGGER.debug("packageManager field in %s selects %s", ancestor.file, profile.id)
                return profile

    for identifier in LOCKFILE_PRIORITY:
        profile = PACKAGE_MANAGERS[identifier]
        if not profile.lockfile:
            continue
        found = find_config_file(root, [profile.lockfile])
        if found is not None:
            _LOGGER.debug("Lockfile %s selects %s", found.file, profile.id)
            return profile

    return DEFAULT_PACKAGE_MANAGER


def infer_archetype(manifest: Dict[str, Any]) -> ProjectArchetype:
    """React when any dependency group lists next, react or react-dom."""
    for name in _REACT_PACKAGES:
        if has_dependency(manifest, name):
            return ProjectArchetype.REACT
    return ProjectArchetype.NODE


__all__ = ["detect_package_manager", "find_config_file", "infer_archetype"]
