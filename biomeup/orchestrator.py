"""Sequences a full ESLint/Prettier to Biome migration."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List

from .config import MigrationConfig, load_config
from .legacy import find_legacy_packages
from .logging import get_logger
from .manifest import (
    apply_lint_scripts,
    read_manifest,
    strip_legacy_config,
    uses_typescript,
    write_manifest,
)
from .models import (
    DirectiveRemovalReport,
    MigrationSummary,
    PackageManagerProfile,
)
from .probe import detect_package_manager, infer_archetype
from .prompts import Prompter
from .runner import CommandRunner
from .scrubber import CommentScrubber
from .summary import SummaryRenderer
from .synthesizer import BIOME_PACKAGE, write_biome_config


class Migrator:
    """Runs the migration steps against an explicit project root."""

    def __init__(
        self,
        root: Path | str,
        *,
        runner: CommandRunner | None = None,
        prompter: Prompter | None = None,
        config: MigrationConfig | None = None,
        scrubber: CommentScrubber | None = None,
        renderer: SummaryRenderer | None = None,
        echo: Callable[[str], None] = print,
    ) -> None:
        self.root = Path(root).expanduser().resolve()
        self.runner = runner or CommandRunner()
        self.prompter = prompter or Prompter()
        self.config = config or load_config(self.root)
        self.scrubber = scrubber or CommentScrubber()
        self.renderer = renderer or SummaryRenderer()
        self.echo = echo
        self.logger = get_logger("orchestrator")

    def run(self) -> MigrationSummary:
        manifest = read_manifest(self.root)
        profile = detect_package_manager(self.root)
        legacy_packages = find_legacy_packages(manifest)
        archetype = infer_archetype(manifest)
        version = self.config.biome_version

        self.echo(self.renderer.banner())
        self.logger.info("Detected package manager: %s", profile.id)
        self.logger.info("Found ESLint/Prettier related packages: %d", len(legacy_packages))
        if legacy_packages:
            self.logger.info("  %s", ", ".join(legacy_packages))
        self.logger.info("Project type selected: %s", archetype.value)

        remove_legacy = bool(legacy_packages) and self._ask_remove_legacy()
        clean_comments = self._ask_clean_comments()

        if remove_legacy:
            self._remove_legacy(profile, legacy_packages)
        elif legacy_packages:
            self.logger.warning("Keeping existing ESLint/Prettier packages as requested.")

        self.logger.info("Installing Biome version %s...", version)
        self.runner.check(profile.install_command(f"{BIOME_PACKAGE}@{version}"))
        config_written = write_biome_config(self.root, archetype, version=version)
        typescript = self._update_scripts(profile)

        report = DirectiveRemovalReport()
        if clean_comments:
            self.logger.info("Scanning project files and removing ESLint directive comments...")
            report = self.scrubber.scrub(self.root)
            self.logger.info("Finished cleaning ESLint comments.")

        if self.config.run_fix:
            self.logger.info("Running lint:fix to apply Biome fixes...")
            self.runner.check(profile.lint_fix)
            self.logger.info("Completed lint:fix.")

        summary = MigrationSummary(
            root=self.root,
            archetype=archetype,
            package_manager=profile,
            biome_version=version,
            legacy_packages=legacy_packages,
            legacy_removed=remove_legacy,
            config_written=config_written,
            typescript=typescript,
            report=report,
        )
        self.echo(self.renderer.summary(summary))
        return summary

    def _ask_remove_legacy(self) -> bool:
        if self.config.remove_legacy is not None:
            return self.config.remove_legacy
        return self.prompter.confirm(
            "Remove all ESLint/Prettier related packages from package.json and node_modules?"
        )

    def _ask_clean_comments(self) -> bool:
        if self.config.clean_comments is not None:
            return self.config.clean_comments
        return self.prompter.confirm("Remove ESLint directive comments from project files?")

    def _remove_legacy(self, profile: PackageManagerProfile, packages: List[str]) -> None:
        self.logger.warning("Removing ESLint/Prettier related packages:")
        self.logger.warning("  %s", ", ".join(packages))
        self.runner.check(profile.uninstall_command(packages))

        # The package manager rewrote package.json, so reload before editing.
        manifest = read_manifest(self.root)
        if strip_legacy_config(manifest):
            write_manifest(self.root, manifest)
            self.logger.info("Removed eslintConfig/prettier configuration from package.json.")

    def _update_scripts(self, profile: PackageManagerProfile) -> bool:
        manifest = read_manifest(self.root)
        typescript = uses_typescript(self.root, manifest)
        added = apply_lint_scripts(manifest, profile, typescript=typescript)
        write_manifest(self.root, manifest)
        self.logger.info("Added scripts to package.json: %s", ", ".join(added))
        return typescript


__all__ = ["Migrator"]
