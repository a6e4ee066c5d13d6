"""Core data models shared across biomeup components."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple


class ProjectArchetype(str, Enum):
    """Project category inferred from the manifest; drives the config shape."""

    REACT = "react"
    NODE = "node"


@dataclass(frozen=True)
class PackageManagerProfile:
    """Fixed commands and metadata for one Node package manager."""

    id: str
    lockfile: Optional[str]
    install_template: str
    uninstall_template: str
    lint_run: str
    lint_fix: str
    run_prefix: str

    def install_command(self, dependency: str) -> str:
        return self.install_template.format(dependency=dependency)

    def uninstall_command(self, packages: Sequence[str]) -> str:
        return self.uninstall_template.format(packages=" ".join(packages))

    def run_script(self, script: str) -> str:
        return f"{self.run_prefix} {script}"


@dataclass(frozen=True)
class FoundFile:
    """Result of an upward file search."""

    directory: Path
    file: Path
    name: str


@dataclass(frozen=True)
class DirectiveRemovalReport:
    """Aggregate counters for a finished comment scrub run."""

    files_scanned: int = 0
    files_modified: int = 0
    directives_removed: int = 0
    modified_paths: Tuple[Path, ...] = ()


@dataclass(frozen=True)
class CommandResult:
    """Outcome of an external command invocation."""

    command: str
    returncode: Optional[int]
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.returncode == 0 and self.error is None


CommandFunc = Callable[[str], CommandResult]


@dataclass
class MigrationSummary:
    """Everything the final report needs to know about a run."""

    root: Path
    archetype: ProjectArchetype
    package_manager: PackageManagerProfile
    biome_version: str
    legacy_packages: List[str]
    legacy_removed: bool
    config_written: bool
    typescript: bool
    report: DirectiveRemovalReport = field(default_factory=DirectiveRemovalReport)
