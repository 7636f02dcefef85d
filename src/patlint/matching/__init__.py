"""Pattern matching and position mapping.

Exports the whole-file matcher and the offset-to-position helpers.
"""
from __future__ import annotations

from patlint.matching.matcher import Match, find_matches
from patlint.matching.positions import LineIndex, Position, offset_to_position

__all__ = [
    "Match",
    "find_matches",
    "Position",
    "LineIndex",
    "offset_to_position",
]
