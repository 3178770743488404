"""Terminal output and prompting.

All user-facing output goes through a :class:`Terminal`, which carries the
verbosity settings chosen on the command line. Prompts are always shown,
even in quiet mode, because the tool cannot proceed without an answer.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape


@dataclass(frozen=True, slots=True)
class OutputSettings:
    """Verbosity flags from the global ``--verbose`` / ``--quiet`` options."""

    verbose: bool = False
    quiet: bool = False

    @property
    def log_level(self) -> str:
        if self.verbose:
            return "DEBUG"
        if self.quiet:
            return "ERROR"
        return "WARNING"


class Terminal:
    """Console wrapper used by the generators.

    ``reader`` returns one line of input without its newline and raises
    ``EOFError`` when input is exhausted. ``sleep`` is used for the short
    pause after an invalid menu choice.
    """

    def __init__(
        self,
        settings: OutputSettings | None = None,
        *,
        console: Console | None = None,
        error_console: Console | None = None,
        reader: Optional[Callable[[], str]] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.settings = settings or OutputSettings()
        self.console = console or Console(highlight=False, soft_wrap=True)
        self.error_console = error_console or Console(stderr=True, highlight=False, soft_wrap=True)
        self._reader = reader or input
        self._sleep = sleep

    def info(self, message: str) -> None:
        if not self.settings.quiet:
            self.console.print(escape(message))

    def detail(self, message: str) -> None:
        if self.settings.verbose:
            self.console.print(f"[dim]{escape(message)}[/dim]")

    def success(self, message: str) -> None:
        if not self.settings.quiet:
            self.console.print(f"[green]{escape(message)}[/green]")

    def warning(self, message: str) -> None:
        if not self.settings.quiet:
            self.console.print(f"[yellow]Warning:[/yellow] {escape(message)}")

    def error(self, message: str) -> None:
        self.error_console.print(f"[red]Error:[/red] {escape(message)}")

    def menu(self, message: str = "") -> None:
        """Print part of an interactive menu regardless of quiet mode."""

        self.console.print(message)

    def ask(self, label: str, default: str = "") -> str:
        """Prompt for a line of text, returning ``default`` on empty input."""

        prompt = label
        if default:
            prompt += f" (default: {default})"
        answer = self.read_line(f"{prompt}: ").strip()
        return answer or default

    def confirm(self, question: str) -> bool:
        answer = self.read_line(f"{question} (y/n): ").strip().lower()
        return answer in ("y", "yes")

    def read_line(self, prompt: str) -> str:
        self.console.print(escape(prompt), end="")
        try:
            return self._reader()
        except EOFError as exc:
            raise OSError("Input stream closed while waiting for a response") from exc

    def pause(self, seconds: float = 1.0) -> None:
        self._sleep(seconds)


__all__ = ["OutputSettings", "Terminal"]
