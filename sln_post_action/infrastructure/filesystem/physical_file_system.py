"""Infrastructure adapter for read-only directory listings.

It implements the application port FileSystemPort on top of pathlib.
"""

from __future__ import annotations

from pathlib import Path

from ...application.ports.services import FileSystemPort


class PhysicalFileSystem(FileSystemPort):
    """Filesystem-backed FileSystemPort."""

    def find_files(self, directory: str, pattern: str) -> list[str]:
        root = Path(directory)
        if not root.is_dir():
            return []
        return [str(p.absolute()) for p in root.glob(pattern) if p.is_file()]

    def parent(self, directory: str) -> str | None:
        current = Path(directory).absolute()
        parent = current.parent
        if parent == current:
            return None
        return str(parent)
