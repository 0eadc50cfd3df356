"""In-memory fakes for testing.

FakeConsole implements the same abstract interface as ClickConsole but
reads from a scripted list and records every line written. No terminal,
no side effects.
"""

from __future__ import annotations

from shop.infrastructure.cli.console import Console


class FakeConsole(Console):

    def __init__(self, commands: list[str] | None = None) -> None:
        self._commands = list(commands or [])
        self.output: list[str] = []

    def read_command(self) -> str | None:
        if not self._commands:
            return None
        return self._commands.pop(0)

    def write(self, text: str = "") -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)
