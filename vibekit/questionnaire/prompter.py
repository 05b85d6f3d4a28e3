"""Line-input capability used by the question runner.

A ``Prompter`` shows a prompt and returns one raw line.  The terminal
implementation wraps ``rich.console.Console.input``; the scripted one replays
a fixed list of lines and is used for tests and piped answer files.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from rich.console import Console


class Prompter(Protocol):
    """Anything that can show *text* and block until one line is entered."""

    def prompt(self, text: str) -> str: ...


class ConsolePrompter:
    """Reads answers from the terminal through a Rich console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def prompt(self, text: str) -> str:
        # markup=False keeps bracketed answers and prompts literal
        return self.console.input(text, markup=False)


class ScriptedPrompter:
    """Replays pre-recorded answers.

    Every prompt shown is kept in ``prompts``.  Running past the end of the
    script raises ``EOFError``, the same signal a closed stdin produces.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self._position = 0
        self.prompts: list[str] = []

    @property
    def remaining(self) -> int:
        return len(self._lines) - self._position

    def prompt(self, text: str) -> str:
        self.prompts.append(text)
        if self._position >= len(self._lines):
            raise EOFError(f"No scripted answer left for prompt {text!r}")
        line = self._lines[self._position]
        self._position += 1
        return line
