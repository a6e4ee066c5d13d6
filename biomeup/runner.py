"""Synchronous shell command execution with inherited stdio."""

from __future__ import annotations

import subprocess

from .errors import CommandError
from .logging import get_logger
from .models import CommandFunc, CommandResult


class CommandRunner:
    """Runs package manager commands through an injectable callable."""

    def __init__(self, runner: CommandFunc | None = None) -> None:
        self._runner = runner or self._default_runner
        self.logger = get_logger("runner")

    def run(self, command: str) -> CommandResult:
        """Run ``command`` and return its result without raising."""
        self.logger.info("> %s", command)
        return self._runner(command)

    def check(self, command: str) -> CommandResult:
        """Run ``command`` and raise CommandError unless it succeeded."""
        result = self.run(command)
        if not result.ok:
            raise CommandError(result)
        return result

    @staticmethod
    def _default_runner(command: str) -> CommandResult:
        try:
            completed = subprocess.run(command, shell=True, check=False)
        except OSError as exc:
            return CommandResult(command=command, returncode=None, error=str(exc))
        return CommandResult(command=command, returncode=completed.returncode)


__all__ = ["CommandRunner"]
