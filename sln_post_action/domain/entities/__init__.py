"""Domain entities.

Core domain objects like CreationResult, CreationEffects and PostAction.
"""

from .creation import (
    ChangeKind,
    CreationEffects,
    CreationResult,
    FileChange,
    PrimaryOutput,
)
from .post_action import (
    GlobList,
    InvalidProjectFiles,
    PostAction,
    PostActionArgs,
    ProjectFileGlobs,
    SingleGlob,
    decode_project_files,
)

__all__ = [
    # Creation entities
    "ChangeKind",
    "CreationEffects",
    "CreationResult",
    "FileChange",
    "PrimaryOutput",
    # Post-action entities
    "PostAction",
    "PostActionArgs",
    "ProjectFileGlobs",
    "SingleGlob",
    "GlobList",
    "InvalidProjectFiles",
    "decode_project_files",
]
