from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from ...domain.entities.creation import CreationEffects
    from ...domain.entities.post_action import PostAction


@runtime_checkable
class TemplateConfigRepositoryPort(Protocol):
    pass

    def load_post_actions(self, path: Path) -> list[PostAction]: ...


@runtime_checkable
class CreationEffectsRepositoryPort(Protocol):
    pass

    def load(self, path: Path) -> CreationEffects: ...
