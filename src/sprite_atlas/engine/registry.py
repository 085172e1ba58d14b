"""Catalog of loaded frame regions and compiled animations."""

from __future__ import annotations

import logging
import threading

from sprite_atlas.types import (
    AssetLookupError,
    CompiledAnimation,
    DuplicateKeyError,
    FrameRegion,
)

from .sprite import AnimatedSprite

logger = logging.getLogger(__name__)


class AssetRegistry:
    """Name-to-asset mappings shared by every loaded collection.

    Keys are unique across all collections loaded into the same registry.
    Entries are immutable once registered, so lookups need no locking.
    Registration is serialized to keep keys unique, and catalog listings
    copy the keys under the same lock.
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._frames: dict[str, FrameRegion] = {}
        self._animations: dict[str, CompiledAnimation] = {}
        self._lock = threading.Lock()

    def register_frame(self, key: str, region: FrameRegion) -> None:
        """Register a frame region.

        Raises:
            DuplicateKeyError: If ``key`` is already registered.
        """
        with self._lock:
            if key in self._frames:
                raise DuplicateKeyError("frame", key)
            self._frames[key] = region
        logger.debug("Registered frame '%s'", key)

    def register_animation(self, key: str, animation: CompiledAnimation) -> None:
        """Register a compiled animation.

        Raises:
            DuplicateKeyError: If ``key`` is already registered.
        """
        with self._lock:
            if key in self._animations:
                raise DuplicateKeyError("animation", key)
            self._animations[key] = animation
        logger.debug("Registered animation '%s' (%d frames)", key, animation.frame_count)

    def lookup_frame(self, key: str) -> FrameRegion:
        """Get a frame region by key.

        Raises:
            AssetLookupError: If no such frame is registered.
        """
        frame = self._frames.get(key)
        if frame is None:
            raise AssetLookupError("frame", key)
        return frame

    def lookup_animation(self, key: str) -> CompiledAnimation:
        """Get a compiled animation by key.

        Raises:
            AssetLookupError: If no such animation is registered.
        """
        anim = self._animations.get(key)
        if anim is None:
            raise AssetLookupError("animation", key)
        return anim

    def has_frame(self, key: str) -> bool:
        return key in self._frames

    def has_animation(self, key: str) -> bool:
        return key in self._animations

    def frame_keys(self) -> list[str]:
        """Sorted list of registered frame keys."""
        with self._lock:
            keys = list(self._frames)
        return sorted(keys)

    def animation_keys(self) -> list[str]:
        """Sorted list of registered animation keys."""
        with self._lock:
            keys = list(self._animations)
        return sorted(keys)

    @property
    def frame_count(self) -> int:
        return len(self._frames)

    @property
    def animation_count(self) -> int:
        return len(self._animations)

    def reset(self) -> None:
        """Drop every registered frame and animation."""
        with self._lock:
            self._frames.clear()
            self._animations.clear()

    def new_sprite(self, name: str) -> AnimatedSprite:
        """Create an independent animated sprite for a registered animation.

        Raises:
            AssetLookupError: If no such animation is registered.
        """
        return AnimatedSprite(self.lookup_animation(name))
