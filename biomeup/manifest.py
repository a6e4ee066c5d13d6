"""Reading, inspecting and rewriting package.json manifests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterator, Tuple

from .errors import ManifestError
from .models import PackageManagerProfile

MANIFEST_FILENAME = "package.json"
TSCONFIG_FILENAME = "tsconfig.json"

DEPENDENCY_GROUPS: tuple[str, ...] = (
    "dependencies",
    "devDependencies",
    "peerDependencies",
    "optionalDependencies",
)

LEGACY_CONFIG_KEYS: tuple[str, ...] = ("eslintConfig", "prettier")

LINT_SCRIPT = "biome lint --diagnostic-level=error --no-errors-on-unmatched"
LINT_FIX_SCRIPT = "biome check --write --unsafe"
TYPE_CHECK_SCRIPT = "tsc -b --noEmit"


def manifest_path(root: Path) -> Path:
    return Path(root) / MANIFEST_FILENAME


def read_manifest(root: Path) -> Dict[str, Any]:
    """Load package.json from ``root``, raising ManifestError on failure."""
    path = manifest_path(root)
    if not path.exists():
        raise ManifestError(
            "No package.json found. Please run this command in your project root."
        )
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        raise ManifestError(f"Could not read or parse package.json: {exc}") from exc
    if not isinstance(data, dict):
        raise ManifestError(
            "Could not read or parse package.json: expected a JSON object at the root"
        )
    return data


def write_manifest(root: Path, manifest: Dict[str, Any]) -> Path:
    """Serialize ``manifest`` with 2-space indentation and a trailing newline."""
    path = manifest_path(root)
    path.write_text(json.dumps(manifest, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return path


def iter_dependencies(manifest: Dict[str, Any]) -> Iterator[Tuple[str, str]]:
    """Yield ``(group, package)`` pairs across all recognised dependency groups."""
    for group in DEPENDENCY_GROUPS:
        deps = manifest.get(group)
        if not isinstance(deps, dict):
            continue
        for name in deps:
            yield group, name


def has_dependency(manifest: Dict[str, Any], name: str) -> bool:
    return any(package == name for _, package in iter_dependencies(manifest))


def uses_typescript(root: Path, manifest: Dict[str, Any]) -> bool:
    """True when a tsconfig.json exists at ``root`` or typescript is a dependency."""
    if (Path(root) / TSCONFIG_FILENAME).exists():
        return True
    return has_dependency(manifest, "typescript")


def strip_legacy_config(manifest: Dict[str, Any]) -> bool:
    """Remove inline ESLint/Prettier configuration keys; return True if any were present."""
    changed = False
    for key in LEGACY_CONFIG_KEYS:
        if key in manifest:
            del manifest[key]
            changed = True
    return changed


def apply_lint_scripts(
    manifest: Dict[str, Any], profile: PackageManagerProfile, *, typescript: bool
) -> Dict[str, str]:
    """Add Biome lint scripts to ``manifest`` in place and return the scripts written."""
    scripts = manifest.get("scripts")
    if not isinstance(scripts, dict):
        scripts = {}
        manifest["scripts"] = scripts

    added: Dict[str, str] = {}
    if typescript:
        type_check = profile.run_script("type-check")
        added["type-check"] = TYPE_CHECK_SCRIPT
        added["lint"] = f"{LINT_SCRIPT} && {type_check}"
        added["lint:fix"] = f"{LINT_FIX_SCRIPT} && {type_check}"
    else:
        added["lint"] = LINT_SCRIPT
        added["lint:fix"] = LINT_FIX_SCRIPT

    scripts.update(added)
    return added


__all__ = [
    "DEPENDENCY_GROUPS",
    "LEGACY_CONFIG_KEYS",
    "MANIFEST_FILENAME",
    "apply_lint_scripts",
    "has_dependency",
    "iter_dependencies",
    "manifest_path",
    "read_manifest",
    "strip_legacy_config",
    "uses_typescript",
    "write_manifest",
]
