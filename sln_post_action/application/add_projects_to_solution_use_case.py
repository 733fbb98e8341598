"""Post-action that adds generated projects to the nearest solution file.

Flow, shared by both entry points:

1. Locate exactly one ``*.sln`` at or above the output directory.
2. Resolve the project files (``ByIndex`` or ``ByGlob``).
3. Run ``dotnet sln <solution> add <projects...>`` once and report the result.

Every outcome is reported through the logger and a boolean; documented
failures never raise.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..constants import ActionIds, Defaults, Messages
from ..domain.services.project_file_resolver import (
    ByGlob,
    ByIndex,
    resolve_project_files,
)
from ..domain.services.solution_locator import find_solution_files
from .models import (
    AddProjectsRequest,
    AddProjectsResponse,
    CommandResult,
    PostActionOutcome,
)
from .ports.services import SolutionCommandError

if TYPE_CHECKING:
    from uuid import UUID

    from ..domain.entities.creation import CreationEffects, CreationResult
    from ..domain.entities.post_action import PostAction
    from ..domain.services.project_file_resolver import ResolverStrategy
    from .ports.services import FileSystemPort, LoggerPort, SolutionCommandPort


@dataclass(slots=True)
class AddProjectsDependencies:
    logger: LoggerPort
    file_system: FileSystemPort
    solution_command: SolutionCommandPort


class AddProjectsToSolutionPostAction:
    ACTION_ID: UUID = ActionIds.ADD_PROJECTS_TO_SOLUTION

    def __init__(
        self,
        dependencies: AddProjectsDependencies,
        *,
        solution_pattern: str = Defaults.SOLUTION_PATTERN,
        project_extension_suffix: str = Defaults.PROJECT_EXTENSION_SUFFIX,
    ) -> None:
        super().__init__()
        self.logger = dependencies.logger
        self._file_system = dependencies.file_system
        self._solution_command = dependencies.solution_command
        self._solution_pattern = solution_pattern
        self._project_extension_suffix = project_extension_suffix

    @property
    def id(self) -> UUID:
        return self.ACTION_ID

    def process(
        self,
        action: PostAction,
        creation_result: CreationResult,
        output_base_path: str,
    ) -> bool:
        response = self._run(ByIndex(creation_result), action, output_base_path)
        return response.success

    def process_with_effects(
        self,
        action: PostAction,
        creation_effects: CreationEffects,
        creation_result: CreationResult,
        output_base_path: str,
    ) -> bool:
        strategy = ByGlob(
            creation_effects=creation_effects, creation_result=creation_result
        )
        return self._run(strategy, action, output_base_path).success

    def execute(self, request: AddProjectsRequest) -> AddProjectsResponse:
        strategy: ResolverStrategy
        if request.creation_effects is not None:
            strategy = ByGlob(
                creation_effects=request.creation_effects,
                creation_result=request.creation_result,
            )
        else:
            strategy = ByIndex(request.creation_result)
        return self._run(strategy, request.action, request.output_base_path)

    def _run(
        self, strategy: ResolverStrategy, action: PostAction, output_base_path: str
    ) -> AddProjectsResponse:
        if not output_base_path or not output_base_path.strip():
            self.logger.error(Messages.UNRESOLVED_SOLUTION_FILE)
            return AddProjectsResponse(
                outcome=PostActionOutcome.UNRESOLVED_SOLUTION_FILE,
                detail="output path is empty",
            )

        solutions = find_solution_files(
            self._file_system, output_base_path, self._solution_pattern
        )
        if len(solutions) != 1:
            self.logger.error(Messages.UNRESOLVED_SOLUTION_FILE)
            detail = (
                f"no {self._solution_pattern} found at or above {output_base_path}"
                if not solutions
                else f"ambiguous solution files: {', '.join(solutions)}"
            )
            self.logger.verbose(detail)
            return AddProjectsResponse(
                outcome=PostActionOutcome.UNRESOLVED_SOLUTION_FILE, detail=detail
            )
        solution = solutions[0]
        self.logger.debug(f"Using solution file {solution}")

        resolution = resolve_project_files(
            strategy,
            action.typed_args,
            output_base_path,
            extension_suffix=self._project_extension_suffix,
        )
        if not resolution.success or resolution.project_files is None:
            self.logger.error(Messages.NO_PROJECT_FILES)
            if resolution.detail:
                self.logger.verbose(resolution.detail)
            return AddProjectsResponse(
                outcome=PostActionOutcome.NO_PROJECT_FILES,
                solution_file=solution,
                detail=resolution.detail,
            )
        project_files = resolution.project_files
        projects_text = " ".join(project_files)

        self.logger.info(
            Messages.RUNNING.format(solution=solution, projects=projects_text)
        )
        try:
            result = self._solution_command.add_projects_to_solution(
                solution, project_files
            )
        except SolutionCommandError as exc:
            result = CommandResult(exit_code=-1, stderr=str(exc))

        if not result.success:
            self.logger.error(
                Messages.FAILED.format(projects=projects_text, solution=solution)
            )
            self.logger.info(
                Messages.COMMAND_OUTPUT.format(
                    output=f"{result.stdout}\n\n{result.stderr}"
                )
            )
            return AddProjectsResponse(
                outcome=PostActionOutcome.COMMAND_FAILED,
                solution_file=solution,
                project_files=project_files,
                command_result=result,
            )

        self.logger.success(
            Messages.SUCCEEDED.format(projects=projects_text, solution=solution)
        )
        return AddProjectsResponse(
            outcome=PostActionOutcome.SUCCEEDED,
            solution_file=solution,
            project_files=project_files,
            command_result=result,
        )
