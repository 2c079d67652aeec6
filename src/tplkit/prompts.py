"""Interactive prompt widgets."""

from __future__ import annotations

from enum import Enum
from typing import Protocol, Sequence, TypeVar

from rich.console import Console
from rich.prompt import Confirm, Prompt

from .errors import InputCanceled

__all__ = ["ConsolePrompter", "Prompter"]


E = TypeVar("E", bound=Enum)


class Prompter(Protocol):
    """Questions the interactive flow needs answered."""

    def text(self, message: str, *, default: str = "") -> str:
        ...

    def confirm(self, message: str) -> bool:
        ...

    def select(self, message: str, options: Sequence[E]) -> E:
        """Return one of ``options``; the first option is the default."""
        ...


class ConsolePrompter:
    """Prompt on the terminal using :mod:`rich.prompt`.

    Interrupting any prompt with ``Ctrl+C`` or ``Ctrl+D`` raises
    :class:`~tplkit.errors.InputCanceled`.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def text(self, message: str, *, default: str = "") -> str:
        try:
            return Prompt.ask(f"[bright_green]{message}[/]", console=self.console, default=default)
        except (KeyboardInterrupt, EOFError) as exc:
            raise InputCanceled() from exc

    def confirm(self, message: str) -> bool:
        try:
            return Confirm.ask(message, console=self.console, default=False)
        except (KeyboardInterrupt, EOFError) as exc:
            raise InputCanceled() from exc

    def select(self, message: str, options: Sequence[E]) -> E:
        if not options:
            raise ValueError("select requires at least one option")
        by_value = {str(option.value): option for option in options}
        try:
            answer = Prompt.ask(
                message,
                console=self.console,
                choices=list(by_value),
                default=str(options[0].value),
            )
        except (KeyboardInterrupt, EOFError) as exc:
            raise InputCanceled() from exc
        return by_value[answer]
