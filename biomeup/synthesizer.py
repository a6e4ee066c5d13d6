"""Builds the biome.json configuration for a project archetype."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Dict

from .logging import get_logger
from .models import ProjectArchetype

BIOME_VERSION = "2.3.8"
BIOME_CONFIG_FILENAME = "biome.json"
BIOME_PACKAGE = "@biomejs/biome"

_LOGGER = get_logger("synthesizer")


def schema_url(version: str = BIOME_VERSION) -> str:
    return f"https://biomejs.dev/schemas/{version}/schema.json"


def _naming_convention(kind: str, formats: list[str], match: str | None = None) -> Dict[str, Any]:
    convention: Dict[str, Any] = {"selector": {"kind": kind}}
    if match is not None:
        convention["match"] = match
    convention["formats"] = formats
    return convention


_BASE_CONFIG: Dict[str, Any] = {
    "linter": {
        "enabled": True,
        "rules": {
            "recommended": True,
            "style": {
                "useTemplate": "error",
                "useImportType": "error",
                "noParameterAssign": "error",
                "useAsConstAssertion": "error",
                "useDefaultParameterLast": "error",
                "useEnumInitializers": "error",
                "useSelfClosingElements": "error",
                "useConst": "error",
                "useSingleVarDeclarator": "error",
                "noUnusedTemplateLiteral": "error",
                "useNumberNamespace": "error",
                "noInferrableTypes": "error",
                "noUselessElse": "error",
                "useNamingConvention": {
                    "level": "error",
                    "options": {
                        "strictCase": False,
                        "conventions": [
                            _naming_convention("interface", ["PascalCase"], "I(.*)|(.*?)Error"),
                            _naming_convention("typeAlias", ["PascalCase"], "T(.*)|(.*?)Error"),
                            _naming_convention(
                                "objectLiteralProperty",
                                ["camelCase", "snake_case", "CONSTANT_CASE", "PascalCase"],
                            ),
                            _naming_convention("enum", ["PascalCase"], "E(.*)|(.*?)Error"),
                            _naming_convention("enumMember", ["CONSTANT_CASE"]),
                        ],
                    },
                },
            },
            "correctness": {
                "noUnusedVariables": "warn",
                "noUnusedImports": "error",
            },
        },
    },
    "files": {
        "includes": [
            "**",
            "!**/dist/**",
            "!**/node_modules/**",
            "!**/.git/**",
            "!**/coverage/**",
        ],
    },
    "assist": {
        "actions": {
            "source": {
                "organizeImports": {
                    "level": "on",
                    "options": {
                        "groups": [
                            [":URL:", ":NODE:", ":PACKAGE:"],
                            ":BLANK_LINE:",
                            ["@/"],
                        ],
                    },
                },
            },
        },
    },
    "formatter": {
        "enabled": True,
        "indentStyle": "space",
        "indentWidth": 2,
        "lineWidth": 80,
    },
    "javascript": {
        "formatter": {
            "indentStyle": "space",
            "indentWidth": 2,
            "quoteStyle": "double",
            "semicolons": "asNeeded",
            "lineEnding": "lf",
        },
    },
    "vcs": {
        "enabled": False,
        "clientKind": "git",
        "useIgnoreFile": False,
    },
}

_REACT_EXTRAS: Dict[str, Any] = {
    "css": {
        "parser": {
            "tailwindDirectives": True,
        },
    },
}


def synthesize_config(
    archetype: ProjectArchetype, *, version: str = BIOME_VERSION
) -> Dict[str, Any]:
    """Return a fresh biome.json mapping; callers may mutate it freely."""
    config: Dict[str, Any] = {"$schema": schema_url(version)}
    config.update(copy.deepcopy(_BASE_CONFIG))
    if archetype is ProjectArchetype.REACT:
        config.update(copy.deepcopy(_REACT_EXTRAS))
    return config


def write_biome_config(
    root: Path, archetype: ProjectArchetype, *, version: str = BIOME_VERSION
) -> bool:
    """Write biome.json under ``root`` unless one already exists."""
    path = Path(root) / BIOME_CONFIG_FILENAME
    if path.exists():
        _LOGGER.warning("A biome.json file already exists. It will not be overwritten.")
        return False
    config = synthesize_config(archetype, version=version)
    path.write_text(json.dumps(config, indent=2) + "\n", encoding="utf-8")
    _LOGGER.info("Created biome.json for project type: %s", archetype.value)
    return True


__all__ = [
    "BIOME_CONFIG_FILENAME",
    "BIOME_PACKAGE",
    "BIOME_VERSION",
    "schema_url",
    "synthesize_config",
    "write_biome_config",
]
