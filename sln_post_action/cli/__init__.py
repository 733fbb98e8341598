import click

from .commands.add import add_command
from .commands.info import info_command
from .commands.locate import locate_command


@click.group()
def app() -> None:
    pass


app.add_command(add_command, name="add")
app.add_command(locate_command, name="locate")
app.add_command(info_command, name="info")

__all__ = ["app"]
