"""Asset registry, loading and animated sprites."""

from __future__ import annotations

from .registry import AssetRegistry
from .sprite import AnimatedSprite
from .asset_loader import AssetLoader, load

__all__ = [
    "AssetRegistry",
    "AnimatedSprite",
    "AssetLoader",
    "load",
]
