"""Adapter running ``dotnet sln`` to register projects in a solution.

The command runs once, synchronously, with both output streams captured.
There is no retry and no timeout: whatever the process returns is final.
"""

from __future__ import annotations

import subprocess
from typing import TYPE_CHECKING

from ...application.models import CommandResult
from ...application.ports.services import SolutionCommandError, SolutionCommandPort
from ...constants import Defaults
from ..io.exceptions import PostActionInfrastructureError

if TYPE_CHECKING:
    from collections.abc import Sequence


class DotnetCommandError(PostActionInfrastructureError, SolutionCommandError):
    pass


class DotnetCli(SolutionCommandPort):
    pass

    def __init__(self, executable: str = Defaults.DOTNET_EXECUTABLE) -> None:
        super().__init__()
        self.executable = executable

    def add_projects_command(
        self, solution_path: str, project_paths: Sequence[str]
    ) -> list[str]:
        return [self.executable, "sln", solution_path, "add", *project_paths]

    def add_projects_to_solution(
        self, solution_path: str, project_paths: Sequence[str]
    ) -> CommandResult:
        argv = self.add_projects_command(solution_path, project_paths)
        try:
            completed = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except FileNotFoundError as exc:
            raise DotnetCommandError(
                f"Command not found: {self.executable!r}"
            ) from exc
        except OSError as exc:
            raise DotnetCommandError(
                f"Failed to execute {self.executable!r}: {exc}"
            ) from exc
        return CommandResult(
            exit_code=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
