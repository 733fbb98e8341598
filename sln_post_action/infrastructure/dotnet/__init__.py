from .dotnet_cli import DotnetCli, DotnetCommandError

__all__ = ["DotnetCli", "DotnetCommandError"]
