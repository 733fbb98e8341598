"""Tests for template source glob matching."""

import pytest

from sln_post_action.domain.services.source_glob import (
    compile_source_glob,
    matches_source_glob,
    normalize_relative_path,
)


class TestNormalizeRelativePath:
    def test_backslashes_become_forward_slashes(self):
        assert normalize_relative_path("src\\App\\App.csproj") == "src/App/App.csproj"

    def test_leading_dot_slash_is_dropped(self):
        assert normalize_relative_path("./src/App.csproj") == "src/App.csproj"

    def test_leading_slash_is_dropped(self):
        assert normalize_relative_path("/App.csproj") == "App.csproj"


class TestMatchesSourceGlob:
    @pytest.mark.parametrize(
        ("pattern", "path"),
        [
            ("App.csproj", "App.csproj"),
            ("*.csproj", "App.csproj"),
            ("src/*/App.csproj", "src/Web/App.csproj"),
            ("**/*.csproj", "App.csproj"),
            ("**/*.csproj", "src/Web/App.csproj"),
            ("src/**", "src/Web/App.csproj"),
            ("App?.csproj", "App1.csproj"),
            ("src\\App.csproj", "src/App.csproj"),
        ],
    )
    def test_matches(self, pattern: str, path: str):
        assert matches_source_glob(pattern, path)

    @pytest.mark.parametrize(
        ("pattern", "path"),
        [
            ("*.csproj", "src/App.csproj"),
            ("App.csproj", "app.csproj"),
            ("App.csproj", "AppXcsproj"),
            ("App?.csproj", "App.csproj"),
            ("App?.csproj", "App/.csproj"),
            ("*.csproj", "App.csproj.user"),
        ],
    )
    def test_does_not_match(self, pattern: str, path: str):
        assert not matches_source_glob(pattern, path)

    def test_compiled_patterns_are_cached(self):
        assert compile_source_glob("**/*.fsproj") is compile_source_glob("**/*.fsproj")
