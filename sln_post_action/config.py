from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import Defaults, EnvVars


@dataclass(frozen=True, slots=True)
class PostActionConfig:
    dotnet_executable: str = Defaults.DOTNET_EXECUTABLE
    solution_pattern: str = Defaults.SOLUTION_PATTERN
    project_extension_suffix: str = Defaults.PROJECT_EXTENSION_SUFFIX

    def __post_init__(self) -> None:
        if not self.dotnet_executable.strip():
            raise ValueError("dotnet_executable must not be empty")
        if not self.solution_pattern.strip():
            raise ValueError("solution_pattern must not be empty")
        if "/" in self.solution_pattern or "\\" in self.solution_pattern:
            raise ValueError(
                f"solution_pattern must be a file name pattern, got {self.solution_pattern!r}"
            )
        if not self.project_extension_suffix.strip():
            raise ValueError("project_extension_suffix must not be empty")

    @classmethod
    def from_env(cls) -> PostActionConfig:
        raw_dotnet = os.getenv(EnvVars.DOTNET_EXECUTABLE)
        raw_pattern = os.getenv(EnvVars.SOLUTION_PATTERN)
        return cls(
            dotnet_executable=(raw_dotnet or "").strip() or Defaults.DOTNET_EXECUTABLE,
            solution_pattern=(raw_pattern or "").strip() or Defaults.SOLUTION_PATTERN,
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> PostActionConfig:
        config = PostActionConfig.from_env()
        if config_file is None:
            config_file = Path(Defaults.CONFIG_FILENAME)
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except Exception as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(
        config_file: Path, base_config: PostActionConfig
    ) -> PostActionConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        dotnet_section = _get_table(data, "dotnet")
        search_section = _get_table(data, "search")
        dotnet_executable = base_config.dotnet_executable
        if (value := dotnet_section.get("executable")) is not None:
            dotnet_executable = _coerce_str(value, key="dotnet.executable")
        solution_pattern = base_config.solution_pattern
        if (value := search_section.get("solution_pattern")) is not None:
            solution_pattern = _coerce_str(value, key="search.solution_pattern")
        project_extension_suffix = base_config.project_extension_suffix
        if (value := search_section.get("project_extension_suffix")) is not None:
            project_extension_suffix = _coerce_str(
                value, key="search.project_extension_suffix"
            )
        return PostActionConfig(
            dotnet_executable=dotnet_executable,
            solution_pattern=solution_pattern,
            project_extension_suffix=project_extension_suffix,
        )


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_str(value: object, *, key: str) -> str:
    if isinstance(value, str):
        return value.strip()
    raise ValueError(f"{key} must be a string, got {type(value).__name__}")
