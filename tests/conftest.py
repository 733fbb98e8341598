import os
from pathlib import Path

import pytest

from sln_post_action.constants import EnvVars


@pytest.fixture(autouse=True)
def _isolated_post_action_env(
    monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory
) -> None:
    """Keep developer settings out of the tests.

    A developer may export SLN_POST_ACTION_* or keep a sln_post_action.toml
    in the working directory; both would leak into ConfigLoader.load().
    """
    for name in (EnvVars.DOTNET_EXECUTABLE, EnvVars.SOLUTION_PATTERN):
        if os.getenv(name) is not None:
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))


@pytest.fixture
def solution_tree(tmp_path: Path) -> Path:
    """A repo root holding App.sln with an empty ``src/App`` output directory."""
    (tmp_path / "App.sln").write_text("", encoding="utf-8")
    output = tmp_path / "src" / "App"
    output.mkdir(parents=True)
    return tmp_path
