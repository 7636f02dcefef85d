"""Plugin registry for patlint extension points."""
from __future__ import annotations

from patlint.plugins.registry import (
    PluginAlreadyRegisteredError,
    PluginNotFoundError,
    PluginRegistry,
)

__all__ = [
    "PluginRegistry",
    "PluginNotFoundError",
    "PluginAlreadyRegisteredError",
]
