"""Rich console logger for post-action runs.

Messages are escaped before printing; ``dotnet`` output routinely contains
square brackets that rich would otherwise read as markup.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import override

from rich.console import Console
from rich.markup import escape

from ...application.ports.services import LoggerPort


class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


@dataclass(slots=True)
class LogContext:
    action_id: str = ""
    output_path: str = ""
    start_time: datetime = field(default_factory=datetime.now)

    def elapsed_ms(self) -> float:
        return (datetime.now() - self.start_time).total_seconds() * 1000

    @property
    def short_action_id(self) -> str:
        return self.action_id[:8]


@dataclass(slots=True)
class LogStats:
    messages: int = 0
    warnings: int = 0
    errors: int = 0


class ConsoleLogger(LoggerPort):
    pass

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats = LogStats()

    def set_context(self, **kwargs: str) -> None:
        """Attach run details; unknown keys are ignored."""
        context = self._context or LogContext()
        for key in ("action_id", "output_path"):
            if key in kwargs:
                setattr(context, key, kwargs[key])
        self._context = context

    def clear_context(self) -> None:
        self._context = None

    def _enabled(self, level: int) -> bool:
        return self.verbosity >= level

    def _emit(
        self, message: str, *, style: str | None = None, symbol: str = ""
    ) -> None:
        text = f"{self._prefix()}{escape(message)}"
        if symbol:
            text = f"{symbol} {text}"
        if style:
            text = f"[{style}]{text}[/{style}]"
        self.console.print(text)

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if not self._enabled(level):
            return
        self._stats.messages += 1
        self._emit(message)

    @override
    def verbose(self, message: str) -> None:
        if self._enabled(LogLevel.VERBOSE):
            self._emit(message, style="dim")

    @override
    def debug(self, message: str) -> None:
        if self._enabled(LogLevel.DEBUG):
            self._emit(message, style="dim cyan")

    @override
    def success(self, message: str) -> None:
        self._stats.messages += 1
        self._emit(message, symbol="[green]✓[/green]")

    @override
    def warning(self, message: str) -> None:
        self._stats.warnings += 1
        self._emit(message, symbol="[yellow]⚠[/yellow]")

    @override
    def error(self, message: str) -> None:
        self._stats.errors += 1
        self._emit(message, symbol="[red]✗[/red]")

    def log_final_stats(self) -> None:
        """Print a short run summary at verbose level and above."""
        if not self._enabled(LogLevel.VERBOSE):
            return
        lines = []
        if self._context is not None:
            lines.append(f"[dim]Finished in {self._context.elapsed_ms():.0f} ms[/dim]")
        lines.append(f"[dim]  Messages: {self._stats.messages}[/dim]")
        if self._stats.warnings:
            lines.append(f"[dim yellow]  Warnings: {self._stats.warnings}[/dim yellow]")
        if self._stats.errors:
            lines.append(f"[dim red]  Errors: {self._stats.errors}[/dim red]")
        self.console.print()
        for line in lines:
            self.console.print(line)

    def get_stats(self) -> dict[str, int]:
        return asdict(self._stats)

    def reset_stats(self) -> None:
        self._stats = LogStats()

    def _prefix(self) -> str:
        if (
            self._context is None
            or not self._context.action_id
            or not self._enabled(LogLevel.DEBUG)
        ):
            return ""
        return escape(f"[{self._context.short_action_id}] ")
