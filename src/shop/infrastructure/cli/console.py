"""Console I/O used by the interactive session.

The session only talks to the abstract Console, so tests can drive it
with scripted input instead of a terminal.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import click


class Console(ABC):

    @abstractmethod
    def read_command(self) -> str | None:
        """Return the next command line, or None when input is exhausted."""

    @abstractmethod
    def write(self, text: str = "") -> None:
        """Print one line of output."""


class ClickConsole(Console):

    def __init__(self, prompt: str = "Enter command") -> None:
        self._prompt = prompt

    def read_command(self) -> str | None:
        try:
            return click.prompt(
                self._prompt, default="", show_default=False, prompt_suffix=": "
            )
        except click.Abort:
            # EOF or Ctrl-C at the prompt
            return None

    def write(self, text: str = "") -> None:
        click.echo(text)
