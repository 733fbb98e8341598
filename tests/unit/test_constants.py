"""Unit tests for constants module.

Tests validate that constants are defined correctly and stay compatible
with templates authored for the existing post-action.
"""

from uuid import UUID

from sln_post_action.constants import ActionIds, ArgKeys, Defaults, Messages


class TestActionIds:
    def test_add_projects_to_solution_id_is_bit_exact(self):
        assert ActionIds.ADD_PROJECTS_TO_SOLUTION == UUID(
            "D396686C-DE0E-4DE6-906D-291CD29FC5DE"
        )
        assert ActionIds.ADD_PROJECTS_TO_SOLUTION.bytes == bytes.fromhex(
            "d396686cde0e4de6906d291cd29fc5de"
        )


class TestArgKeys:
    def test_keys_match_template_manifest_names(self):
        assert ArgKeys.PRIMARY_OUTPUT_INDEXES == "primaryOutputIndexes"
        assert ArgKeys.PROJECT_FILES == "projectFiles"


class TestDefaults:
    def test_defaults_values(self):
        assert Defaults.DOTNET_EXECUTABLE == "dotnet"
        assert Defaults.SOLUTION_PATTERN == "*.sln"
        assert Defaults.PROJECT_EXTENSION_SUFFIX == "proj"
        assert Defaults.INDEX_SEPARATOR == ";"


class TestMessages:
    def test_templates_format(self):
        text = Messages.SUCCEEDED.format(projects="a.csproj b.csproj", solution="App.sln")

        assert text == (
            "Successfully added project(s) a.csproj b.csproj to solution file App.sln."
        )
        assert "{" not in Messages.FAILED.format(projects="p", solution="s")
        assert Messages.COMMAND_OUTPUT.format(output="boom").endswith("boom")
