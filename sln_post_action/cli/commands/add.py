"""Add command - Register generated projects in the nearest solution file.

This module serves as a thin adapter between the Click CLI framework and the
application layer's AddProjectsToSolutionPostAction. It is responsible for:
1. Parsing CLI arguments
2. Assembling the post-action, creation result and creation effects
3. Calling the use case
4. Turning a failed outcome into a non-zero exit
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import TYPE_CHECKING, cast

import click
from rich.console import Console

from ...application.models import AddProjectsRequest
from ...config import ConfigLoader
from ...constants import ActionIds, ArgKeys
from ...domain.entities.creation import CreationResult
from ...domain.entities.post_action import PostAction
from ...infrastructure.container import DependencyContainer
from ...infrastructure.io.exceptions import DataSourceError
from ...infrastructure.logging.console_logger import ConsoleLogger

if TYPE_CHECKING:
    from ...domain.entities.creation import CreationEffects

console = Console()


@dataclass(frozen=True)
class AddCommandOptions:
    outputs: tuple[str, ...]
    primary_output_indexes: str | None
    project_files: str | None
    effects_file: Path | None
    template_file: Path | None
    config_file: Path | None
    dotnet_executable: str | None
    verbose: int

    @classmethod
    def from_kwargs(cls, options: dict[str, object]) -> AddCommandOptions:
        return cls(
            outputs=tuple(cast("tuple[str, ...]", options.get("outputs") or ())),
            primary_output_indexes=cast(
                "str | None", options.get("primary_output_indexes")
            ),
            project_files=cast("str | None", options.get("project_files")),
            effects_file=cast("Path | None", options.get("effects_file")),
            template_file=cast("Path | None", options.get("template_file")),
            config_file=cast("Path | None", options.get("config_file")),
            dotnet_executable=cast("str | None", options.get("dotnet_executable")),
            verbose=cast("int", options.get("verbose") or 0),
        )


@click.command()
@click.argument("output_dir", type=click.Path(file_okay=False, path_type=Path))
@click.option(
    "-o",
    "--output",
    "outputs",
    multiple=True,
    help="Primary output path relative to OUTPUT_DIR (repeatable, order matters)",
)
@click.option(
    "--primary-output-indexes",
    help="Semicolon-separated indexes of the primary outputs to add, e.g. '0;2'",
)
@click.option(
    "--project-files",
    help='JSON source glob or array of globs, e.g. \'["**/*.csproj"]\'',
)
@click.option(
    "--effects",
    "effects_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Creation-effects JSON report (file changes and primary outputs)",
)
@click.option(
    "--template",
    "template_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Template manifest whose postActions supply the arguments",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a sln_post_action.toml config file (default: ./sln_post_action.toml)",
)
@click.option(
    "--dotnet",
    "dotnet_executable",
    help="dotnet executable to run (default: dotnet on PATH)",
)
@click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
def add_command(output_dir: Path, **options: object) -> None:
    """Add generated projects to the solution file nearest to OUTPUT_DIR.

    The solution is the single *.sln found in OUTPUT_DIR or, failing that,
    in the closest ancestor directory containing one.

    Examples:

    \b
        # Add every primary output
        sln-post-action add src/MyApp -o MyApp.csproj

    \b
        # Add only the first and third primary outputs
        sln-post-action add out -o A.csproj -o README.md -o B.csproj \\
            --primary-output-indexes "0;2"

    \b
        # Map source globs through a creation-effects report
        sln-post-action add out --effects effects.json --project-files '"**/*.csproj"'

    \b
        # Use the arguments declared in a template manifest
        sln-post-action add out --effects effects.json --template template.json
    """
    command_options = AddCommandOptions.from_kwargs(dict(options))

    config = ConfigLoader.load(config_file=command_options.config_file)
    if command_options.dotnet_executable:
        config = replace(config, dotnet_executable=command_options.dotnet_executable)

    container = DependencyContainer(
        verbose=command_options.verbose, console=console, config=config
    )

    try:
        action = _build_post_action(container, command_options)
        creation_effects: CreationEffects | None = None
        if command_options.effects_file is not None:
            creation_effects = container.create_creation_effects_repository().load(
                command_options.effects_file
            )
    except DataSourceError as exc:
        raise click.ClickException(str(exc)) from exc

    if command_options.outputs:
        creation_result = CreationResult.from_paths(command_options.outputs)
    elif creation_effects is not None:
        creation_result = creation_effects.creation_result
    else:
        creation_result = CreationResult()

    output_base_path = str(output_dir.absolute())
    logger = container.create_logger()
    if isinstance(logger, ConsoleLogger):
        logger.set_context(
            action_id=str(action.action_id), output_path=output_base_path
        )

    use_case = container.create_add_projects_post_action()
    response = use_case.execute(
        AddProjectsRequest(
            action=action,
            creation_result=creation_result,
            output_base_path=output_base_path,
            creation_effects=creation_effects,
        )
    )

    if isinstance(logger, ConsoleLogger):
        logger.log_final_stats()

    if not response.success:
        raise click.ClickException(
            f"Post-action failed ({response.outcome.value.replace('_', ' ')})"
        )


def _build_post_action(
    container: DependencyContainer, options: AddCommandOptions
) -> PostAction:
    args: dict[str, str] = {}
    description: str | None = None
    if options.template_file is not None:
        post_actions = container.create_template_config_repository().load_post_actions(
            options.template_file
        )
        matching = [
            a for a in post_actions if a.action_id == ActionIds.ADD_PROJECTS_TO_SOLUTION
        ]
        if not matching:
            raise click.ClickException(
                f"{options.template_file} declares no post-action "
                f"{ActionIds.ADD_PROJECTS_TO_SOLUTION}"
            )
        args.update(matching[0].args)
        description = matching[0].description

    if options.primary_output_indexes is not None:
        args[ArgKeys.PRIMARY_OUTPUT_INDEXES] = options.primary_output_indexes
    if options.project_files is not None:
        args[ArgKeys.PROJECT_FILES] = options.project_files

    return PostAction(
        action_id=ActionIds.ADD_PROJECTS_TO_SOLUTION,
        args=args,
        description=description,
    )
