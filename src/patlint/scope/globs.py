"""Shell-style glob matching for repository-relative paths.

``fnmatch`` alone lets ``*`` run across ``/``, so patterns are split into
path segments and matched segment by segment:

- ``*`` matches any run of characters inside one segment
- ``?`` matches one character inside one segment
- ``[...]`` / ``[!...]`` are character classes
- ``**`` as a whole segment matches zero or more segments

A pattern with no ``/`` in it is also tried against the basename, so
``*.md`` matches ``docs/guide.md`` as well as ``README.md``.

Patterns are always relative to the repository root: a leading ``/`` is
ignored, and a trailing ``/`` names a directory, so ``vendor/`` means
``vendor/**``.

Examples::

    match_glob("src/app/main.py", "src/**/*.py")   -> True
    match_glob("src/main.py", "src/**/*.py")       -> True
    match_glob("src/app/main.py", "src/*.py")      -> False
    match_glob("docs/guide.md", "*.md")            -> True
    match_glob("vendor/lib/a.js", "vendor/")       -> True
    match_glob("src/main.py", "/src/*.py")         -> True
"""
from __future__ import annotations

from collections.abc import Iterable
from fnmatch import fnmatchcase
from pathlib import PurePath


def normalize_path(path: str | PurePath) -> str:
    """Return ``path`` with forward slashes and no leading ``./``."""
    text = str(path).replace("\\", "/")
    while text.startswith("./"):
        text = text[2:]
    return text


def match_glob(path: str | PurePath, pattern: str) -> bool:
    """Return True if ``path`` matches the glob ``pattern``."""
    path_text = normalize_path(path)
    pattern_text = normalize_path(pattern).lstrip("/")
    if not pattern_text:
        return False
    if pattern_text.endswith("/"):
        pattern_text = pattern_text.rstrip("/") + "/**"

    path_parts = path_text.split("/")
    if "/" not in pattern_text:
        return fnmatchcase(path_parts[-1], pattern_text) or _match_segments(
            path_parts, [pattern_text]
        )
    return _match_segments(path_parts, pattern_text.split("/"))


def match_any(path: str | PurePath, patterns: Iterable[str]) -> bool:
    """Return True if ``path`` matches at least one glob in ``patterns``."""
    return any(match_glob(path, pattern) for pattern in patterns)


def _match_segments(path_parts: list[str], pattern_parts: list[str]) -> bool:
    seen: dict[tuple[int, int], bool] = {}

    def match_from(p_idx: int, s_idx: int) -> bool:
        key = (p_idx, s_idx)
        if key in seen:
            return seen[key]

        if p_idx == len(pattern_parts):
            result = s_idx == len(path_parts)
        elif pattern_parts[p_idx] == "**":
            # zero segments, or consume one and stay on **
            result = match_from(p_idx + 1, s_idx) or (
                s_idx < len(path_parts) and match_from(p_idx, s_idx + 1)
            )
        elif s_idx < len(path_parts) and fnmatchcase(path_parts[s_idx], pattern_parts[p_idx]):
            result = match_from(p_idx + 1, s_idx + 1)
        else:
            result = False

        seen[key] = result
        return result

    return match_from(0, 0)
