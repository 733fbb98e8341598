from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from ...application.ports.repositories import CreationEffectsRepositoryPort
from ...domain.entities.creation import CreationEffects
from ..io.exceptions import DataParseError
from ._json import read_json
from .documents import CreationEffectsDocument


class CreationEffectsLoadError(DataParseError):
    pass


class CreationEffectsRepository(CreationEffectsRepositoryPort):
    """Reads a creation-effects report written by the generation engine."""

    def load(self, path: Path) -> CreationEffects:
        file_path = Path(path)
        data = read_json(file_path, what="Creation effects")
        try:
            document = CreationEffectsDocument.model_validate(data)
        except ValidationError as exc:
            raise CreationEffectsLoadError(
                f"Invalid creation effects {file_path}: {exc}"
            ) from exc
        return document.to_entity()
