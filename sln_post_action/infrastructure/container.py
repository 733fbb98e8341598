from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from ..application.add_projects_to_solution_use_case import (
    AddProjectsDependencies,
    AddProjectsToSolutionPostAction,
)
from ..config import PostActionConfig
from .dotnet.dotnet_cli import DotnetCli
from .filesystem.physical_file_system import PhysicalFileSystem
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger
from .repositories.creation_effects_repository import CreationEffectsRepository
from .repositories.template_config_repository import TemplateConfigRepository

if TYPE_CHECKING:
    from ..application.ports.repositories import (
        CreationEffectsRepositoryPort,
        TemplateConfigRepositoryPort,
    )
    from ..application.ports.services import (
        FileSystemPort,
        LoggerPort,
        SolutionCommandPort,
    )


class DependencyContainer:
    pass

    def __init__(
        self,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
        config: PostActionConfig | None = None,
    ) -> None:
        super().__init__()
        self.verbose = verbose
        self.console = console or Console()
        self.use_null_logger = use_null_logger
        self.config = config or PostActionConfig()
        self._logger_instance: LoggerPort | None = None
        self._file_system_instance: FileSystemPort | None = None
        self._solution_command_instance: SolutionCommandPort | None = None
        self._template_config_repository_instance: (
            TemplateConfigRepositoryPort | None
        ) = None
        self._creation_effects_repository_instance: (
            CreationEffectsRepositoryPort | None
        ) = None

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console, verbosity=self.verbose
                )
        return self._logger_instance

    def create_file_system(self) -> FileSystemPort:
        if self._file_system_instance is None:
            self._file_system_instance = PhysicalFileSystem()
        return self._file_system_instance

    def create_solution_command(self) -> SolutionCommandPort:
        if self._solution_command_instance is None:
            self._solution_command_instance = DotnetCli(
                executable=self.config.dotnet_executable
            )
        return self._solution_command_instance

    def create_template_config_repository(self) -> TemplateConfigRepositoryPort:
        if self._template_config_repository_instance is None:
            self._template_config_repository_instance = TemplateConfigRepository()
        return self._template_config_repository_instance

    def create_creation_effects_repository(self) -> CreationEffectsRepositoryPort:
        if self._creation_effects_repository_instance is None:
            self._creation_effects_repository_instance = CreationEffectsRepository()
        return self._creation_effects_repository_instance

    def create_add_projects_post_action(self) -> AddProjectsToSolutionPostAction:
        dependencies = AddProjectsDependencies(
            logger=self.create_logger(),
            file_system=self.create_file_system(),
            solution_command=self.create_solution_command(),
        )
        return AddProjectsToSolutionPostAction(
            dependencies,
            solution_pattern=self.config.solution_pattern,
            project_extension_suffix=self.config.project_extension_suffix,
        )
