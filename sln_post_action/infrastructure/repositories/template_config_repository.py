from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from ...application.ports.repositories import TemplateConfigRepositoryPort
from ...domain.entities.post_action import PostAction
from ..io.exceptions import DataParseError
from ._json import read_json
from .documents import TemplateManifestDocument


class TemplateConfigLoadError(DataParseError):
    pass


class TemplateConfigRepository(TemplateConfigRepositoryPort):
    """Reads the ``postActions`` declared in a template manifest."""

    def load_post_actions(self, path: Path) -> list[PostAction]:
        file_path = Path(path)
        data = read_json(file_path, what="Template manifest")
        try:
            manifest = TemplateManifestDocument.model_validate(data)
        except ValidationError as exc:
            raise TemplateConfigLoadError(
                f"Invalid template manifest {file_path}: {exc}"
            ) from exc
        return [action.to_entity() for action in manifest.post_actions]
