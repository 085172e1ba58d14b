"""JSON manifest loaders."""

from __future__ import annotations

from .collection import check_manifest, load_manifest
from .spritesheet import check_spritesheet, load_spritesheet
from .animations import check_animations, load_animations

__all__ = [
    "check_manifest",
    "load_manifest",
    "check_spritesheet",
    "load_spritesheet",
    "check_animations",
    "load_animations",
]
