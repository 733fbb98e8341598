"""Tests for nearest-wins solution file discovery."""

from pathlib import Path

from sln_post_action.domain.services.solution_locator import (
    find_files_at_or_above_path,
    find_solution_files,
)
from sln_post_action.infrastructure.filesystem import PhysicalFileSystem


class FakeFileSystem:
    """In-memory FileSystemPort keyed by directory."""

    def __init__(self, files: dict[str, list[str]], parents: dict[str, str]) -> None:
        self.files = files
        self.parents = parents
        self.visited: list[str] = []

    def find_files(self, directory: str, pattern: str) -> list[str]:
        self.visited.append(directory)
        return list(self.files.get(directory, []))

    def parent(self, directory: str) -> str | None:
        return self.parents.get(directory)


class TestFindFilesAtOrAbovePath:
    def test_stops_at_first_level_with_matches(self):
        fs = FakeFileSystem(
            files={"/repo/src": ["/repo/src/B.sln"], "/repo": ["/repo/A.sln"]},
            parents={"/repo/src/app": "/repo/src", "/repo/src": "/repo", "/repo": "/"},
        )

        result = find_files_at_or_above_path(fs, "/repo/src/app", "*.sln")

        assert result == ["/repo/src/B.sln"]
        assert fs.visited == ["/repo/src/app", "/repo/src"]

    def test_returns_empty_when_root_reached(self):
        fs = FakeFileSystem(files={}, parents={"/a/b": "/a", "/a": "/"})

        assert find_files_at_or_above_path(fs, "/a/b", "*.sln") == []
        assert fs.visited == ["/a/b", "/a", "/"]

    def test_returns_every_match_of_the_nearest_level(self):
        fs = FakeFileSystem(
            files={"/a": ["/a/Two.sln", "/a/One.sln"]}, parents={"/a": "/"}
        )

        assert find_files_at_or_above_path(fs, "/a", "*.sln") == [
            "/a/One.sln",
            "/a/Two.sln",
        ]


class TestFindSolutionFilesOnDisk:
    def test_solution_in_output_directory_wins_over_ancestor(self, tmp_path: Path):
        (tmp_path / "Root.sln").write_text("")
        output = tmp_path / "src" / "App"
        output.mkdir(parents=True)
        (output / "App.sln").write_text("")

        result = find_solution_files(PhysicalFileSystem(), str(output))

        assert result == [str(output / "App.sln")]

    def test_ascends_to_ancestor(self, solution_tree: Path):
        output = solution_tree / "src" / "App"

        result = find_solution_files(PhysicalFileSystem(), str(output))

        assert result == [str(solution_tree / "App.sln")]

    def test_two_solutions_at_nearest_level_are_both_returned(self, tmp_path: Path):
        (tmp_path / "A.sln").write_text("")
        (tmp_path / "B.sln").write_text("")

        result = find_solution_files(PhysicalFileSystem(), str(tmp_path))

        assert len(result) == 2

    def test_other_files_are_ignored(self, tmp_path: Path):
        (tmp_path / "App.csproj").write_text("")
        (tmp_path / "App.sln.bak").write_text("")
        (tmp_path / "App.sln").write_text("")

        result = find_solution_files(PhysicalFileSystem(), str(tmp_path))

        assert result == [str(tmp_path / "App.sln")]

    def test_custom_pattern(self, tmp_path: Path):
        (tmp_path / "App.slnx").write_text("")

        result = find_solution_files(PhysicalFileSystem(), str(tmp_path), "*.slnx")

        assert result == [str(tmp_path / "App.slnx")]
