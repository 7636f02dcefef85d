"""Path scope resolution.

Exports the glob matcher and the include/exclude resolver used to decide
which rules run against which files.
"""
from __future__ import annotations

from patlint.scope.globs import match_any, match_glob, normalize_path
from patlint.scope.resolver import applies_to, in_scope, passes_global_scope

__all__ = [
    "match_glob",
    "match_any",
    "normalize_path",
    "in_scope",
    "passes_global_scope",
    "applies_to",
]
