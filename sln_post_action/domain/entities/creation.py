from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

from ..services.source_glob import matches_source_glob

if TYPE_CHECKING:
    from collections.abc import Sequence


class ChangeKind(StrEnum):
    CREATE = "Create"
    CHANGE = "Change"
    DELETE = "Delete"
    OVERWRITE = "Overwrite"


def _empty_primary_outputs() -> tuple[PrimaryOutput, ...]:
    return ()


def _empty_file_changes() -> tuple[FileChange, ...]:
    return ()


@dataclass(frozen=True, slots=True)
class PrimaryOutput:
    path: str


@dataclass(frozen=True, slots=True)
class CreationResult:
    primary_outputs: Sequence[PrimaryOutput] = field(
        default_factory=_empty_primary_outputs
    )

    @classmethod
    def from_paths(cls, paths: Sequence[str]) -> CreationResult:
        return cls(primary_outputs=tuple(PrimaryOutput(path=p) for p in paths))


@dataclass(frozen=True, slots=True)
class FileChange:
    source_relative_path: str
    target_relative_path: str
    change_kind: ChangeKind = ChangeKind.CREATE


@dataclass(frozen=True, slots=True)
class CreationEffects:
    creation_result: CreationResult = field(default_factory=CreationResult)
    file_changes: Sequence[FileChange] = field(default_factory=_empty_file_changes)

    def targets_for_source(self, source_glob: str) -> list[str]:
        """Return target paths of every file change whose source matches the glob.

        Order follows ``file_changes``; one glob may yield several targets.
        """
        return [
            change.target_relative_path
            for change in self.file_changes
            if matches_source_glob(source_glob, change.source_relative_path)
        ]
