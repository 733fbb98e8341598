"""sln-post-action package.

Post-generation action for project templates: after a template writes its
files, register the generated projects in the nearest solution file by
running ``dotnet sln <solution> add <projects...>``.

Features:
- Nearest-wins ``*.sln`` discovery above the output directory
- Project selection by primary output index or by source glob
- Template manifest (``postActions``) and creation-effects loading
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("sln-post-action")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

# Core exports
from sln_post_action.application.add_projects_to_solution_use_case import (
    AddProjectsDependencies,
    AddProjectsToSolutionPostAction,
)
from sln_post_action.constants import ActionIds
from sln_post_action.domain.entities import (
    CreationEffects,
    CreationResult,
    FileChange,
    PostAction,
    PrimaryOutput,
)
from sln_post_action.domain.services.solution_locator import find_solution_files

__all__ = [
    "__version__",
    # Post-action
    "ActionIds",
    "AddProjectsDependencies",
    "AddProjectsToSolutionPostAction",
    "find_solution_files",
    # Entities
    "CreationEffects",
    "CreationResult",
    "FileChange",
    "PostAction",
    "PrimaryOutput",
]
