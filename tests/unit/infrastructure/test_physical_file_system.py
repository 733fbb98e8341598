"""Tests for the filesystem adapter."""

from pathlib import Path

from sln_post_action.application.ports.services import FileSystemPort
from sln_post_action.infrastructure.filesystem import PhysicalFileSystem


class TestPhysicalFileSystem:
    def test_implements_port(self):
        assert isinstance(PhysicalFileSystem(), FileSystemPort)

    def test_find_files_returns_absolute_matches(self, tmp_path: Path):
        (tmp_path / "App.sln").write_text("")
        (tmp_path / "Other.txt").write_text("")

        assert PhysicalFileSystem().find_files(str(tmp_path), "*.sln") == [
            str(tmp_path / "App.sln")
        ]

    def test_find_files_skips_directories(self, tmp_path: Path):
        (tmp_path / "Folder.sln").mkdir()

        assert PhysicalFileSystem().find_files(str(tmp_path), "*.sln") == []

    def test_find_files_in_missing_directory(self, tmp_path: Path):
        assert PhysicalFileSystem().find_files(str(tmp_path / "missing"), "*.sln") == []

    def test_find_files_is_not_recursive(self, tmp_path: Path):
        nested = tmp_path / "nested"
        nested.mkdir()
        (nested / "App.sln").write_text("")

        assert PhysicalFileSystem().find_files(str(tmp_path), "*.sln") == []

    def test_parent(self, tmp_path: Path):
        assert PhysicalFileSystem().parent(str(tmp_path / "a")) == str(tmp_path)

    def test_parent_of_root_is_none(self):
        root = Path.cwd().anchor

        assert PhysicalFileSystem().parent(root) is None
