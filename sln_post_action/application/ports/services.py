from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..models import CommandResult


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...


@runtime_checkable
class FileSystemPort(Protocol):
    pass

    def find_files(self, directory: str, pattern: str) -> list[str]: ...

    def parent(self, directory: str) -> str | None: ...


@runtime_checkable
class SolutionCommandPort(Protocol):
    pass

    def add_projects_to_solution(
        self, solution_path: str, project_paths: Sequence[str]
    ) -> CommandResult: ...


class SolutionCommandError(Exception):
    """Raised by a SolutionCommandPort when the command cannot be started."""
