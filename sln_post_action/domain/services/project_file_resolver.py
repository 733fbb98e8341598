"""Resolution of the project files a post-action should add to a solution.

Two strategies exist. ``ByIndex`` is the legacy behaviour: project files are
primary outputs, optionally narrowed by ``primaryOutputIndexes``. ``ByGlob``
maps the ``projectFiles`` source globs through the creation effects to the
generated targets, and defers to ``ByIndex`` when the template did not opt in
by declaring ``projectFiles``.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
import re
from typing import TYPE_CHECKING

from ...constants import Defaults
from ..entities.post_action import InvalidProjectFiles

if TYPE_CHECKING:
    from ..entities.creation import CreationEffects, CreationResult
    from ..entities.post_action import PostActionArgs

_INDEX_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True, slots=True)
class ByIndex:
    creation_result: CreationResult


@dataclass(frozen=True, slots=True)
class ByGlob:
    creation_effects: CreationEffects
    creation_result: CreationResult


type ResolverStrategy = ByIndex | ByGlob


@dataclass(frozen=True, slots=True)
class ProjectResolution:
    project_files: list[str] | None
    detail: str | None = None
    applicable: bool = True

    @property
    def success(self) -> bool:
        return bool(self.project_files)

    @classmethod
    def failed(cls, detail: str) -> ProjectResolution:
        return cls(project_files=None, detail=detail)

    @classmethod
    def not_applicable(cls) -> ProjectResolution:
        return cls(project_files=None, applicable=False)


def has_project_extension(
    path: str, suffix: str = Defaults.PROJECT_EXTENSION_SUFFIX
) -> bool:
    extension = os.path.splitext(path)[1]
    return extension.lower().endswith(suffix.lower())


def resolve_by_index(
    args: PostActionArgs, creation_result: CreationResult, output_base_path: str
) -> ProjectResolution:
    outputs = list(creation_result.primary_outputs)
    if args.primary_output_indexes is None:
        return ProjectResolution(
            project_files=[os.path.join(output_base_path, o.path) for o in outputs]
        )

    files: list[str] = []
    for token in args.primary_output_indexes.split(Defaults.INDEX_SEPARATOR):
        if not token:
            continue
        stripped = token.strip()
        if not _INDEX_RE.fullmatch(stripped):
            return ProjectResolution.failed(f"'{stripped}' is not an index")
        index = int(stripped)
        if index < 0 or index >= len(outputs):
            return ProjectResolution.failed(
                f"index {index} is out of range for {len(outputs)} primary output(s)"
            )
        files.append(os.path.join(output_base_path, outputs[index].path))
    return ProjectResolution(project_files=files)


def resolve_by_glob(
    args: PostActionArgs,
    creation_effects: CreationEffects,
    output_base_path: str,
    *,
    extension_suffix: str = Defaults.PROJECT_EXTENSION_SUFFIX,
) -> ProjectResolution:
    project_files = args.project_files
    if project_files is None:
        return ProjectResolution.not_applicable()
    if isinstance(project_files, InvalidProjectFiles):
        return ProjectResolution.failed(
            f"projectFiles is malformed: {project_files.reason}"
        )

    files: list[str] = []
    for pattern in project_files.patterns:
        for target in creation_effects.targets_for_source(pattern):
            if has_project_extension(target, extension_suffix):
                files.append(os.path.join(output_base_path, target))
    if not files:
        return ProjectResolution.failed(
            f"no '*{extension_suffix}' targets matched {list(project_files.patterns)}"
        )
    return ProjectResolution(project_files=files)


def resolve_project_files(
    strategy: ResolverStrategy,
    args: PostActionArgs,
    output_base_path: str,
    *,
    extension_suffix: str = Defaults.PROJECT_EXTENSION_SUFFIX,
) -> ProjectResolution:
    if isinstance(strategy, ByGlob):
        resolution = resolve_by_glob(
            args,
            strategy.creation_effects,
            output_base_path,
            extension_suffix=extension_suffix,
        )
        if resolution.applicable:
            return resolution
        return resolve_by_index(args, strategy.creation_result, output_base_path)
    return resolve_by_index(args, strategy.creation_result, output_base_path)
