"""Configuration loading for biomeup (.biomeup.yml)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import MigrationError
from .synthesizer import BIOME_VERSION

CONFIG_FILENAME = ".biomeup.yml"


class ConfigError(MigrationError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class MigrationConfig:
    """Settings that pre-answer prompts or tune a migration run.

    ``remove_legacy`` and ``clean_comments`` left as None mean the user is
    asked interactively.
    """

    root: Path
    biome_version: str = BIOME_VERSION
    remove_legacy: Optional[bool] = None
    clean_comments: Optional[bool] = None
    run_fix: bool = True


def load_config(config_path: Path) -> MigrationConfig:
    """Load configuration from a project directory or an explicit file path."""
    config_file = _resolve_config_path(Path(config_path))
    root = config_file.parent.resolve()

    if not config_file.exists():
        return MigrationConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = MigrationConfig(root=root)
    version = _as_str(data.get("biome_version"))
    if version:
        config.biome_version = version
    config.remove_legacy = _as_bool(data.get("remove_legacy"))
    config.clean_comments = _as_bool(data.get("clean_comments"))
    run_fix = _as_bool(data.get("run_fix"))
    if run_fix is not None:
        config.run_fix = run_fix
    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = ["CONFIG_FILENAME", "ConfigError", "MigrationConfig", "load_config"]
