"""Small logging helpers shared by the font and layout modules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rich.console import Console
import typer


@dataclass(slots=True)
class TypesetLogger:
    """Light wrapper around a Rich console with graceful degradation.

    When no console is attached, messages go through ``typer.echo`` and
    warnings are highlighted with ``typer.secho``.
    """

    verbose: bool = False
    console: Console | None = None

    def _render_message(self, message: str, args: tuple[Any, ...]) -> str:
        if args:
            try:
                message = message % args
            except (TypeError, ValueError):
                message = " ".join([message, *(str(arg) for arg in args)])
        return message

    def info(self, message: str, *args: Any) -> None:
        message = self._render_message(message, args)
        if self.console is not None:
            self.console.log(message)
            return
        typer.echo(message, err=True)

    def warning(self, message: str, *args: Any) -> None:
        message = self._render_message(message, args)
        if self.console is not None:
            self.console.log(f"[yellow]{message}[/yellow]")
            return
        typer.secho(message, fg="yellow", err=True)

    def notice(self, message: str, *args: Any) -> None:
        """Alias for info to mirror the CLI vocabulary."""
        self.info(message, *args)

    def debug(self, message: str, *args: Any) -> None:
        """Emit a debug/verbose message when verbose mode is enabled."""
        if not self.verbose:
            return
        self.info(message, *args)


__all__ = ["TypesetLogger"]
