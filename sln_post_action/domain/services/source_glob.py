"""Glob matching for template source references.

Template authors refer to generated files by their *source* path inside the
template, e.g. ``"MyApp/MyApp.csproj"`` or ``"**/*.csproj"``. Patterns use
forward slashes regardless of host OS:

- ``**`` matches any number of path segments (including none)
- ``*`` matches any run of characters within one segment
- ``?`` matches exactly one character within one segment

Everything else is matched literally, case-sensitively.
"""

from __future__ import annotations

from functools import lru_cache
import re


def normalize_relative_path(path: str) -> str:
    normalized = path.replace("\\", "/")
    while normalized.startswith("./"):
        normalized = normalized[2:]
    return normalized.lstrip("/")


@lru_cache(maxsize=256)
def compile_source_glob(pattern: str) -> re.Pattern[str]:
    """Translate a source glob into an anchored regular expression."""
    glob = normalize_relative_path(pattern)
    parts: list[str] = []
    i = 0
    length = len(glob)
    while i < length:
        char = glob[i]
        if glob.startswith("**/", i):
            parts.append("(?:[^/]*/)*")
            i += 3
        elif glob.startswith("**", i):
            parts.append(".*")
            i += 2
        elif char == "*":
            parts.append("[^/]*")
            i += 1
        elif char == "?":
            parts.append("[^/]")
            i += 1
        else:
            parts.append(re.escape(char))
            i += 1
    return re.compile("".join(parts) + r"\Z")


def matches_source_glob(pattern: str, path: str) -> bool:
    return compile_source_glob(pattern).match(normalize_relative_path(path)) is not None
