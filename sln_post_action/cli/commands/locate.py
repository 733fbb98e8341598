from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from ...config import ConfigLoader
from ...domain.services.solution_locator import find_solution_files
from ...infrastructure.container import DependencyContainer

console = Console()


@click.command()
@click.argument(
    "output_dir", type=click.Path(file_okay=False, path_type=Path), default="."
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a sln_post_action.toml config file (default: ./sln_post_action.toml)",
)
def locate_command(output_dir: Path, config_file: Path | None) -> None:
    """Show the solution file(s) nearest to OUTPUT_DIR.

    Directories are searched from OUTPUT_DIR upwards; the first directory
    containing any solution file wins. Exits non-zero unless exactly one
    solution file is found there.
    """
    config = ConfigLoader.load(config_file=config_file)
    container = DependencyContainer(config=config, console=console)
    start = str(output_dir.absolute())
    matches = find_solution_files(
        container.create_file_system(), start, config.solution_pattern
    )

    table = Table(title=f"Solution files nearest to {start}")
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Path")
    for index, match in enumerate(matches):
        table.add_row(str(index), match)
    console.print(table)

    if not matches:
        raise click.ClickException(
            f"No {config.solution_pattern} found at or above {start}"
        )
    if len(matches) > 1:
        raise click.ClickException(
            f"Found {len(matches)} solution files; expected exactly one"
        )
