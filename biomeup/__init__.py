"""Migrate JavaScript/TypeScript projects from ESLint/Prettier to Biome."""

from .errors import CommandError, ManifestError, MigrationError
from .orchestrator import Migrator

__version__ = "0.1.0"

__all__ = ["CommandError", "ManifestError", "MigrationError", "Migrator", "__version__"]
