"""Package manager profiles and detection priority."""

from __future__ import annotations

from typing import Dict, Optional

from .models import PackageManagerProfile

PNPM = PackageManagerProfile(
    id="pnpm",
    lockfile="pnpm-lock.yaml",
    install_template="pnpm add -D -E {dependency}",
    uninstall_template="pnpm remove {packages}",
    lint_run="pnpm lint",
    lint_fix="pnpm lint:fix",
    run_prefix="pnpm",
)

YARN = PackageManagerProfile(
    id="yarn",
    lockfile="yarn.lock",
    install_template="yarn add -D -E {dependency}",
    uninstall_template="yarn remove {packages}",
    lint_run="yarn lint",
    lint_fix="yarn lint:fix",
    run_prefix="yarn",
)

BUN = PackageManagerProfile(
    id="bun",
    lockfile="bun.lockb",
    install_template="bun add -D -E {dependency}",
    uninstall_template="bun remove {packages}",
    lint_run="bun run lint",
    lint_fix="bun run lint:fix",
    run_prefix="bun run",
)

NPM = PackageManagerProfile(
    id="npm",
    lockfile=None,
    install_template="npm install -D -E {dependency}",
    uninstall_template="npm uninstall {packages}",
    lint_run="npm run lint",
    lint_fix="npm run lint:fix",
    run_prefix="npm run",
)

PACKAGE_MANAGERS: Dict[str, PackageManagerProfile] = {
    profile.id: profile for profile in (PNPM, YARN, BUN, NPM)
}

# Lockfile search order; npm has no lockfile entry and is the fallback.
LOCKFILE_PRIORITY: tuple[str, ...] = ("pnpm", "yarn", "bun")

DEFAULT_PACKAGE_MANAGER = NPM


def get_profile(identifier: str) -> Optional[PackageManagerProfile]:
    """Return the profile for ``identifier`` or None when unknown."""
    return PACKAGE_MANAGERS.get(identifier)


def parse_package_manager_field(value: object) -> Optional[PackageManagerProfile]:
    """Resolve a ``packageManager`` field such as ``pnpm@9.0.0``."""
    if not isinstance(value, str):
        return None
    name = value.split("@", 1)[0].strip()
    return get_profile(name)


__all__ = [
    "BUN",
    "DEFAULT_PACKAGE_MANAGER",
    "LOCKFILE_PRIORITY",
    "NPM",
    "PACKAGE_MANAGERS",
    "PNPM",
    "YARN",
    "get_profile",
    "parse_package_manager_field",
]
