"""Exceptions surfaced to the user as plain messages."""

from __future__ import annotations

from typing import Optional

from .models import CommandResult


class MigrationError(RuntimeError):
    """Expected, actionable failure reported without a traceback."""


class ManifestError(MigrationError):
    """Raised when package.json is missing or cannot be parsed."""


class CommandError(MigrationError):
    """Raised when an external command exits unsuccessfully."""

    def __init__(self, result: CommandResult) -> None:
        message = f"Command failed: {result.command}"
        if result.returncode is not None:
            message += f" (exit code {result.returncode})"
        elif result.error:
            message += f" ({result.error})"
        super().__init__(message)
        self.result = result

    @property
    def returncode(self) -> Optional[int]:
        return self.result.returncode


__all__ = ["CommandError", "ManifestError", "MigrationError"]
