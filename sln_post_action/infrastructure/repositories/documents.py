"""Pydantic models for the JSON documents read from disk.

Field names follow the camelCase used by template manifests; snake_case is
accepted too.
"""

from __future__ import annotations

import json
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ...domain.entities.creation import (
    ChangeKind,
    CreationEffects,
    CreationResult,
    FileChange,
    PrimaryOutput,
)
from ...domain.entities.post_action import PostAction


class _Document(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )


class ManualInstructionDocument(_Document):
    text: str = ""


class PostActionDocument(_Document):
    action_id: UUID
    description: str | None = None
    args: dict[str, object] = Field(default_factory=dict)
    manual_instructions: list[ManualInstructionDocument] = Field(default_factory=list)
    continue_on_error: bool = False

    def to_entity(self) -> PostAction:
        return PostAction(
            action_id=self.action_id,
            args={key: _arg_to_str(value) for key, value in self.args.items()},
            description=self.description,
            manual_instructions=tuple(i.text for i in self.manual_instructions),
            continue_on_error=self.continue_on_error,
        )


class TemplateManifestDocument(_Document):
    identity: str | None = None
    name: str | None = None
    post_actions: list[PostActionDocument] = Field(default_factory=list)


class PrimaryOutputDocument(_Document):
    path: str


class FileChangeDocument(_Document):
    source_relative_path: str
    target_relative_path: str
    change_kind: ChangeKind = ChangeKind.CREATE


class CreationEffectsDocument(_Document):
    primary_outputs: list[PrimaryOutputDocument] = Field(default_factory=list)
    file_changes: list[FileChangeDocument] = Field(default_factory=list)

    def to_entity(self) -> CreationEffects:
        return CreationEffects(
            creation_result=CreationResult(
                primary_outputs=tuple(
                    PrimaryOutput(path=o.path) for o in self.primary_outputs
                )
            ),
            file_changes=tuple(
                FileChange(
                    source_relative_path=c.source_relative_path,
                    target_relative_path=c.target_relative_path,
                    change_kind=c.change_kind,
                )
                for c in self.file_changes
            ),
        )


def _arg_to_str(value: object) -> str:
    # args are a string map; structured values travel as their JSON text
    if isinstance(value, str):
        return value
    return json.dumps(value)
