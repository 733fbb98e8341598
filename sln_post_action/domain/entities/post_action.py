"""Post-action declarations and their typed arguments.

A template declares post-actions as an action id plus a string-keyed,
string-valued argument map. The add-projects-to-solution action recognises
two keys, decoded once into :class:`PostActionArgs`:

- ``primaryOutputIndexes``: semicolon-separated indexes into the primary
  outputs (legacy selection).
- ``projectFiles``: JSON, either a single source glob or an array of them
  (effects-based selection). Decoded into one of :class:`SingleGlob`,
  :class:`GlobList` or :class:`InvalidProjectFiles`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import json
from typing import TYPE_CHECKING, cast

from ...constants import ArgKeys

if TYPE_CHECKING:
    from collections.abc import Mapping
    from uuid import UUID


def _empty_args() -> dict[str, str]:
    return {}


def _empty_instructions() -> tuple[str, ...]:
    return ()


@dataclass(frozen=True, slots=True)
class SingleGlob:
    pattern: str

    @property
    def patterns(self) -> tuple[str, ...]:
        return (self.pattern,)


@dataclass(frozen=True, slots=True)
class GlobList:
    patterns: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class InvalidProjectFiles:
    raw: str
    reason: str


type ProjectFileGlobs = SingleGlob | GlobList | InvalidProjectFiles


def decode_project_files(raw: str) -> ProjectFileGlobs:
    try:
        value: object = json.loads(raw)
    except json.JSONDecodeError as exc:
        return InvalidProjectFiles(raw=raw, reason=f"invalid JSON: {exc}")
    if isinstance(value, str):
        return SingleGlob(pattern=value)
    if isinstance(value, list):
        items = cast("list[object]", value)
        # non-string entries are skipped, not rejected
        return GlobList(patterns=tuple(v for v in items if isinstance(v, str)))
    return InvalidProjectFiles(
        raw=raw,
        reason=f"expected a string or an array of strings, got {type(value).__name__}",
    )


@dataclass(frozen=True, slots=True)
class PostActionArgs:
    primary_output_indexes: str | None = None
    project_files: ProjectFileGlobs | None = None

    @classmethod
    def from_mapping(cls, args: Mapping[str, str] | None) -> PostActionArgs:
        if not args:
            return cls()
        raw_project_files = args.get(ArgKeys.PROJECT_FILES)
        return cls(
            primary_output_indexes=args.get(ArgKeys.PRIMARY_OUTPUT_INDEXES),
            project_files=(
                decode_project_files(raw_project_files)
                if raw_project_files is not None
                else None
            ),
        )


@dataclass(frozen=True, slots=True)
class PostAction:
    action_id: UUID
    args: Mapping[str, str] = field(default_factory=_empty_args)
    description: str | None = None
    manual_instructions: tuple[str, ...] = field(default_factory=_empty_instructions)
    continue_on_error: bool = False

    @property
    def typed_args(self) -> PostActionArgs:
        return PostActionArgs.from_mapping(self.args)
