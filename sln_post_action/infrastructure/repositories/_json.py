from __future__ import annotations

import json
from typing import TYPE_CHECKING

from ..io.exceptions import DataParseError, DataSourceNotFoundError

if TYPE_CHECKING:
    from pathlib import Path


def read_json(file_path: Path, *, what: str) -> object:
    if not file_path.exists():
        raise DataSourceNotFoundError(f"{what} not found: {file_path}")
    try:
        with file_path.open("r", encoding="utf-8-sig") as handle:
            return json.load(handle)
    except json.JSONDecodeError as exc:
        raise DataParseError(f"Invalid JSON in {file_path}: {exc}") from exc
    except OSError as exc:
        raise DataParseError(f"Failed to read {what} {file_path}: {exc}") from exc
