import click
from rich.console import Console
from rich.table import Table

from ...constants import ActionIds, ArgKeys

console = Console()


@click.command()
def info_command() -> None:
    """Show the post-action identifier and the arguments it understands."""
    console.print(f"[bold]Action ID:[/bold] {ActionIds.ADD_PROJECTS_TO_SOLUTION}")
    table = Table(title="Recognised Arguments")
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    table.add_row(
        ArgKeys.PRIMARY_OUTPUT_INDEXES,
        "Semicolon-separated indexes into the primary outputs",
    )
    table.add_row(
        ArgKeys.PROJECT_FILES,
        "JSON source glob, or array of globs, mapped to generated files",
    )
    console.print(table)
