from __future__ import annotations

from typing import TYPE_CHECKING

from ...constants import Defaults

if TYPE_CHECKING:
    from ...application.ports.services import FileSystemPort


def find_files_at_or_above_path(
    file_system: FileSystemPort, start_path: str, pattern: str
) -> list[str]:
    """Return matches from the nearest directory, walking up from ``start_path``.

    The walk stops at the first directory with any match, even if it has
    several; ancestors are never consulted past that point. An empty list
    means the filesystem root was reached without a match.
    """
    directory: str | None = start_path
    while directory is not None:
        matches = file_system.find_files(directory, pattern)
        if matches:
            return sorted(matches)
        directory = file_system.parent(directory)
    return []


def find_solution_files(
    file_system: FileSystemPort,
    start_path: str,
    pattern: str = Defaults.SOLUTION_PATTERN,
) -> list[str]:
    return find_files_at_or_above_path(file_system, start_path, pattern)
