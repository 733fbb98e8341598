from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..domain.entities.creation import CreationEffects, CreationResult
    from ..domain.entities.post_action import PostAction


def _empty_str_list() -> list[str]:
    return []


class PostActionOutcome(StrEnum):
    SUCCEEDED = "succeeded"
    UNRESOLVED_SOLUTION_FILE = "unresolved_solution_file"
    NO_PROJECT_FILES = "no_project_files"
    COMMAND_FAILED = "command_failed"


@dataclass(frozen=True, slots=True)
class CommandResult:
    exit_code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def success(self) -> bool:
        return self.exit_code == 0


@dataclass(slots=True)
class AddProjectsRequest:
    action: PostAction
    creation_result: CreationResult
    output_base_path: str
    creation_effects: CreationEffects | None = None


@dataclass(slots=True)
class AddProjectsResponse:
    outcome: PostActionOutcome
    solution_file: str | None = None
    project_files: list[str] = field(default_factory=_empty_str_list)
    command_result: CommandResult | None = None
    detail: str | None = None

    @property
    def success(self) -> bool:
        return self.outcome is PostActionOutcome.SUCCEEDED
