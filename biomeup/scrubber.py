"""Removal of ESLint directive comments from source files."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Sequence, Tuple

from .logging import get_logger
from .models import DirectiveRemovalReport

CODE_EXTENSIONS = frozenset(
    {
        ".js",
        ".jsx",
        ".ts",
        ".tsx",
        ".mjs",
        ".cjs",
        ".vue",
        ".svelte",
        ".astro",
    }
)

IGNORED_DIRECTORIES = frozenset(
    {
        "node_modules",
        ".git",
        "dist",
        "build",
        "coverage",
        ".next",
        ".turbo",
        ".cache",
        ".vscode",
        ".idea",
    }
)


def _directive_pattern(body: str) -> re.Pattern[str]:
    # A directive alone on its line takes the indentation and line break with it.
    return re.compile(
        rf"^[ \t]*(?:{body})[ \t]*(?:\r\n|\n|\r|\Z)|(?:{body})",
        re.MULTILINE,
    )


@dataclass(frozen=True)
class DirectiveRule:
    """A single match-and-strip transformation for one directive shape."""

    name: str
    pattern: re.Pattern[str]

    def apply(self, text: str) -> Tuple[str, int]:
        """Return ``text`` with every match deleted and the number of matches."""
        return self.pattern.subn("", text)


# Applied in this order; later rules see the output of earlier ones, so the
# specific disable/enable/env shapes run before the generic catch-alls.
DIRECTIVE_RULES: tuple[DirectiveRule, ...] = (
    DirectiveRule("block-disable", _directive_pattern(r"/\*\s*eslint-disable(?:(?!\*/)[\s\S])*\*/")),
    DirectiveRule("block-enable", _directive_pattern(r"/\*\s*eslint-enable(?:(?!\*/)[\s\S])*\*/")),
    DirectiveRule("block-env", _directive_pattern(r"/\*\s*eslint-env(?:(?!\*/)[\s\S])*\*/")),
    DirectiveRule("block-rules", _directive_pattern(r"/\*\s*eslint\s+[^*]*\*/")),
    DirectiveRule("line-disable", _directive_pattern(r"//\s*eslint-disable[^\n\r]*")),
    DirectiveRule("line-enable", _directive_pattern(r"//\s*eslint-enable[^\n\r]*")),
    DirectiveRule("line-env", _directive_pattern(r"//\s*eslint-env[^\n\r]*")),
    DirectiveRule("line-generic", _directive_pattern(r"//\s*eslint-[^\n\r]*")),
)


def strip_directives(
    text: str, rules: Sequence[DirectiveRule] = DIRECTIVE_RULES
) -> Tuple[str, int]:
    """Run ``rules`` left to right over ``text``; return the result and total matches."""
    removed = 0
    for rule in rules:
        text, count = rule.apply(text)
        removed += count
    return text, removed


def is_code_file(path: Path) -> bool:
    return path.suffix in CODE_EXTENSIONS


def _raise_walk_error(exc: OSError) -> None:
    raise exc


def iter_code_files(root: Path) -> Iterator[Path]:
    """Yield code files under ``root`` depth-first, pruning ignored directories.

    A directory that cannot be listed raises instead of being skipped.
    """
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        dirnames[:] = sorted(name for name in dirnames if name not in IGNORED_DIRECTORIES)
        current_dir = Path(dirpath)
        for filename in sorted(filenames):
            path = current_dir / filename
            if path.is_symlink() or not path.is_file():
                continue
            if is_code_file(path):
                yield path


class CommentScrubber:
    """Walks a project tree and deletes ESLint directive comments in place."""

    def __init__(self, rules: Sequence[DirectiveRule] = DIRECTIVE_RULES) -> None:
        self.rules = tuple(rules)
        self.logger = get_logger("scrubber")

    def scrub_file(self, path: Path) -> int:
        """Strip directives from one file; rewrite it only when something matched."""
        original = path.read_bytes().decode("utf-8")
        cleaned, removed = strip_directives(original, self.rules)
        if removed > 0:
            path.write_bytes(cleaned.encode("utf-8"))
            self.logger.debug("Removed %d directive(s) from %s", removed, path)
        return removed

    def scrub(self, root: Path) -> DirectiveRemovalReport:
        """Scrub every code file under ``root`` and return aggregate counts.

        Read and write errors propagate and abort the walk; files already
        rewritten stay rewritten.
        """
        root_path = Path(root).expanduser().resolve()
        if not root_path.is_dir():
            raise NotADirectoryError(f"Project path is not a directory: {root}")

        files_scanned = 0
        directives_removed = 0
        modified: List[Path] = []
        for path in iter_code_files(root_path):
            files_scanned += 1
            removed = self.scrub_file(path)
            if removed > 0:
                directives_removed += removed
                modified.append(path)
        return DirectiveRemovalReport(
            files_scanned=files_scanned,
            files_modified=len(modified),
            directives_removed=directives_removed,
            modified_paths=tuple(modified),
        )


__all__ = [
    "CODE_EXTENSIONS",
    "CommentScrubber",
    "DIRECTIVE_RULES",
    "DirectiveRule",
    "IGNORED_DIRECTORIES",
    "is_code_file",
    "iter_code_files",
    "strip_directives",
]
