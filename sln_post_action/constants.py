from uuid import UUID


class ActionIds:
    ADD_PROJECTS_TO_SOLUTION = UUID("D396686C-DE0E-4DE6-906D-291CD29FC5DE")


class ArgKeys:
    PRIMARY_OUTPUT_INDEXES = "primaryOutputIndexes"
    PROJECT_FILES = "projectFiles"


class Defaults:
    DOTNET_EXECUTABLE = "dotnet"
    SOLUTION_PATTERN = "*.sln"
    PROJECT_EXTENSION_SUFFIX = "proj"
    CONFIG_FILENAME = "sln_post_action.toml"
    INDEX_SEPARATOR = ";"


class EnvVars:
    DOTNET_EXECUTABLE = "SLN_POST_ACTION_DOTNET"
    SOLUTION_PATTERN = "SLN_POST_ACTION_SOLUTION_PATTERN"


class Messages:
    UNRESOLVED_SOLUTION_FILE = (
        "Unable to determine which solution file to add the reference to."
    )
    NO_PROJECT_FILES = "No project files to add were found in the template output."
    RUNNING = "Adding projects to solution {solution}: {projects}"
    FAILED = "Failed to add project(s) {projects} to solution file {solution}."
    SUCCEEDED = "Successfully added project(s) {projects} to solution file {solution}."
    COMMAND_OUTPUT = "Command output:\n{output}"