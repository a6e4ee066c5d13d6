"""Interactive yes/no questions."""

from __future__ import annotations

from typing import Callable

_YES = {"y", "yes"}
_NO = {"n", "no"}


class Prompter:
    """Asks confirmation questions on the terminal."""

    def __init__(
        self,
        *,
        assume_yes: bool = False,
        input_func: Callable[[str], str] | None = None,
    ) -> None:
        self.assume_yes = assume_yes
        self._input = input_func or input

    def confirm(self, message: str, *, default: bool = True) -> bool:
        if self.assume_yes:
            return default
        hint = "Y/n" if default else "y/N"
        while True:
            try:
                answer = self._input(f"? {message} ({hint}) ")
            except EOFError:
                return default
            answer = answer.strip().lower()
            if not answer:
                return default
            if answer in _YES:
                return True
            if answer in _NO:
                return False


__all__ = ["Prompter"]
